#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
报告文案素材

按日主天干、五行索引的固定文案片段，由 core.analyzers.bazi_text_analyzer 选用拼装。
"""

from types import MappingProxyType

# 日主诗诀
DAY_MASTER_POEMS = MappingProxyType({
    '甲': '栋梁之木性刚直，志存高远有担当。仁厚心慈多恻隐，勇往直前不彷徨。',
    '乙': '花草藤萝性温柔，能屈能伸少烦忧。灵秀聪慧多才艺，借得东风好出头。',
    '丙': '太阳之火照四方，热情豪爽气昂扬。光明磊落无城府，性急之时易受伤。',
    '丁': '烛火一点夜生明，外柔内刚最重情。心思缜密善体察，照人照己两分明。',
    '戊': '城墙厚土重诚信，稳重踏实立根基。胸怀宽广能容物，固执之处失良机。',
    '己': '田园沃土育万物，心地善良性温和。多才多艺善筹谋，思虑过多自蹉跎。',
    '庚': '刀剑之金性刚烈，果断仗义不虚言。路见不平常相助，锋芒太露损人缘。',
    '辛': '珠玉之金温润光，外表柔和内刚强。珍惜羽毛重体面，细腻敏感费思量。',
    '壬': '江河之水奔不息，聪明机敏有谋略。宽宏大量纳百川，随性奔波难自约。',
    '癸': '雨露之水润无声，温柔内敛重感情。心思细腻多变化，阴晴难测意难明。',
})

# 日主性格
DAY_MASTER_DESCRIPTIONS = MappingProxyType({
    '甲': '作为「甲木」，你像一棵参天大树，进取心与责任感都很强，为人正直，愿意庇护身边的人；只是有时过于执拗，不肯弯腰，遇到风雨反而容易受挫。',
    '乙': '作为「乙木」，你像花草藤萝，柔韧而适应力强，懂得能屈能伸。你心思细腻，善于察言观色，富有艺术感，但也容易依赖他人、缺乏安全感。',
    '丙': '作为「丙火」，你像天上的太阳，热情开朗，走到哪里都带去光和热。你不记仇、不藏私，只是性子急，说话太直，偶尔无意中得罪人。',
    '丁': '作为「丁火」，你像夜里的烛光，外表温和，内心很有主见。你观察细致，重感情，常常燃烧自己照亮别人，但也容易想得太多。',
    '戊': '作为「戊土」，你像厚重的高山，稳重踏实，言出必行，是旁人信赖的依靠。你不喜变动，有时反应偏慢，可能错过稍纵即逝的机会。',
    '己': '作为「己土」，你像田园里的沃土，温和善良，包容而富有孕育力。你做事细心有条理，外表随和，内心却颇有城府，不轻易信任他人。',
    '庚': '作为「庚金」，你像锋利的刀剑，刚毅果断，讲义气，做事干脆利落，执行力很强；但过于刚直时容易伤人，需要经历磨炼方能成器。',
    '辛': '作为「辛金」，你像精致的珠玉，气质温润，注重仪表与体面。你自尊心强，受不得委屈，心思敏感，容易为小事耿耿于怀。',
    '壬': '作为「壬水」，你像奔腾的江河，聪明机敏，思维活跃，向往自由，闯劲十足；但容易任性，做事凭兴致，情绪起伏也较大。',
    '癸': '作为「癸水」，你像春天的雨露，温柔内敛，富有同情心与想象力。你习惯润物无声，不喜正面冲突，但有时过于悲观，情绪化较重。',
})

# 五行对应行业
INDUSTRIES = MappingProxyType({
    '木': '文化教育、医疗卫生、园林种植、家具设计、出版传媒',
    '火': '互联网、人工智能、能源化工、餐饮娱乐、自媒体',
    '土': '房地产、建筑工程、农业畜牧、企业管理、仓储物流',
    '金': '金融证券、机械五金、法律法务、珠宝首饰、汽车交通',
    '水': '进出口贸易、旅游运输、环保清洁、服务行业、营销策划',
})

# 择偶建议
PARTNER_TYPES = MappingProxyType({
    '水': '宜寻找包容型伴侣：对方能给您温暖与支持，理解并分担您的压力。',
    '火': '宜寻找热情型伴侣：对方开朗乐观，欣赏您的才华，能让生活充满活力。',
    '木': '宜寻找正直型伴侣：对方积极向上、心地善良，能给您可靠的依靠。',
    '金': '宜寻找果断型伴侣：对方做事干练、有原则，能帮您理清生活中的决断。',
    '土': '宜寻找稳重型伴侣：对方诚实守信、包容心强，能给您十足的安全感。',
})

# 五行对应脏腑
ORGANS = MappingProxyType({
    '木': '主肝胆、神经、四肢',
    '火': '主心、小肠、血液、眼睛',
    '土': '主脾胃、消化、肌肉',
    '金': '主肺、呼吸道、大肠、皮肤',
    '水': '主肾、膀胱、生殖系统、耳',
})

# 五行失衡常见症状
SYMPTOMS = MappingProxyType({
    '木': '神经衰弱、焦虑失眠、肝气郁结、四肢易伤',
    '火': '心律不齐、血压波动、视力下降、心神不宁',
    '土': '消化不良、胃病、身体沉重',
    '金': '呼吸道敏感、易感冒咳嗽、皮肤过敏',
    '水': '肾虚水肿、畏寒肢冷、生殖系统不适',
})

# 饮食建议
FOODS = MappingProxyType({
    '木': '绿色蔬菜、酸味食物、猕猴桃、绿茶',
    '火': '红枣、桂圆、羊肉、红豆',
    '土': '小米、南瓜、红薯、牛肉',
    '金': '白萝卜、梨、银耳、百合',
    '水': '黑豆、黑芝麻、黑木耳、海产',
})

# 养生要诀
WELLNESS_PRINCIPLES = MappingProxyType({
    '火': ('暖局', '补火'),
    '水': ('润燥', '补水'),
    '木': ('扶木', '疏肝'),
    '金': ('强金', '宣肺'),
    '土': ('健脾', '固本'),
})

# 情志调摄（按最弱五行）
EMOTION_ADVICE = MappingProxyType({
    '木': '“肝主怒”，要学会疏导情绪，避免生闷气，多与乐观的朋友相处。',
    '火': '“心主喜”，也容易焦虑，建议多做冥想，避免大喜大悲。',
    '土': '“脾主思”，容易思虑过重，多去户外走走，不要闷在屋里想问题。',
    '金': '“肺主悲”，容易多愁善感，秋季尤需调节情绪，多做扩胸运动。',
    '水': '“肾主恐”，容易缺乏安全感，多晒太阳，增强自信。',
})

# 理疗建议（按首选喜用五行）
THERAPY_HINTS = MappingProxyType({
    '火': '可常做艾灸，温补阳气，尤其关元、足三里等穴位。',
    '水': '睡前温水泡脚，按揉涌泉穴，滋阴补肾。',
    '木': '多做拉伸与经络推拿，疏通肝经，保持气机条达。',
    '金': '练习腹式呼吸，秋冬注意保暖防燥，可配合刮痧宣肺。',
    '土': '饭后摩腹，规律作息，少食多餐以养脾胃。',
})

# 开运信息
LUCKY_INFO = MappingProxyType({
    '木': MappingProxyType({
        'direction': '东方、东南方', 'color': '绿色、青色', 'number': '3、8',
        'item': '木质饰品、绿植', 'animal': '虎、兔',
        'good': '您的贵人方位，宜居宜业，能增强健康运。',
        'bad': '压力较大的方位，尽量避免。',
    }),
    '火': MappingProxyType({
        'direction': '南方', 'color': '红色、紫色', 'number': '2、7',
        'item': '红绳、灯饰', 'animal': '蛇、马',
        'good': '事业发展与求财的重要方位，能增强自信与活力。',
        'bad': '容易引发口舌是非或急躁情绪的方位。',
    }),
    '土': MappingProxyType({
        'direction': '本地、东北、西南', 'color': '黄色、棕色', 'number': '5、0',
        'item': '玉石、陶瓷', 'animal': '龙、狗、牛、羊',
        'good': '利于置业安家，带来稳定的安全感。',
        'bad': '耗泄精力、助长压力的方位。',
    }),
    '金': MappingProxyType({
        'direction': '西方、西北方', 'color': '白色、金色', 'number': '4、9',
        'item': '金属饰品、腕表', 'animal': '猴、鸡',
        'good': '利于决策与执行，增强决断力。',
        'bad': '容易增加心理压力的方位。',
    }),
    '水': MappingProxyType({
        'direction': '北方', 'color': '黑色、蓝色', 'number': '1、6',
        'item': '黑曜石、流动摆件', 'animal': '猪、鼠',
        'good': '利于思考与策划，化解危机，带来贵人。',
        'bad': '容易情绪低落或漂泊不定的方位。',
    }),
})
