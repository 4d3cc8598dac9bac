#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
报告文案生成

纯函数：输入已算好的命盘、五行统计、旺衰与大运，按条件选取 core.data.analysis_texts
中的模板片段拼成六个段落（性格、事业、情感、健康、开运、结语）。
与数值引擎解耦，可整体替换为其他渲染实现。
"""

from typing import Callable, List, Sequence

from core.analyzers.wangshuai_analyzer import WangShuaiAnalyzer
from core.calculators.bazi_core import get_element_relation
from core.data import analysis_texts as texts
from core.data.stems_branches import BRANCH_CHONG, ELEMENTS, get_element
from core.models import AnalysisSections, BaziChart, ElementScores, LuckPillar

AnalysisRenderer = Callable[[BaziChart, ElementScores, bool, Sequence[LuckPillar]], AnalysisSections]

# 日主与坐下（日支）五行关系
_DAY_BRANCH_SENTENCES = {
    'same': '干支同气，自我意识强，主观性强。',
    'me_producing': '日主生坐下，乐于付出，对伴侣关爱有加。',
    'producing_me': '坐下生日主，得伴侣或家庭助力，内心有依靠。',
    'me_controlling': '日主克坐下，掌控欲较强，在家庭中占据主导。',
    'controlling_me': '坐下克日主，责任感强，或受家庭、伴侣约束较多。',
}

LATE_BLOOMER_SCORE = 70


class BaziTextAnalyzer:
    """报告文案生成器"""

    def __init__(self, chart: BaziChart, wuxing: ElementScores, is_strong: bool, luck_pillars: Sequence[LuckPillar]):
        self.chart = chart
        self.wuxing = wuxing
        self.is_strong = is_strong
        self.luck_pillars = luck_pillars

        self.me = chart.day_master_element
        self.favorable = WangShuaiAnalyzer.get_favorable_elements(self.me, is_strong)
        self.primary = self.favorable[0]
        self.secondary = self.favorable[1] if len(self.favorable) > 1 else self.primary

    def render(self) -> AnalysisSections:
        return AnalysisSections(
            personality=tuple(self.personality()),
            career=tuple(self.career()),
            love=tuple(self.love()),
            health=tuple(self.health()),
            advice=tuple(self.advice()),
            life_message=tuple(self.life_message()),
        )

    # === 性格 ======================================================================================

    def personality(self) -> List[str]:
        day_stem = self.chart.day.stem
        day_branch = self.chart.day.branch
        branch_element = get_element(day_branch)
        relation = get_element_relation(self.me, branch_element)
        return [
            f"日主为{day_stem}{self.me}",
            '【基本性格】:',
            texts.DAY_MASTER_DESCRIPTIONS[day_stem],
            '【诗云】:',
            texts.DAY_MASTER_POEMS[day_stem],
            '【命理原象】:',
            f"日干为「{day_stem}」，五行属「{self.me}」。日支为「{day_branch}」，五行属「{branch_element}」。"
            f"{_DAY_BRANCH_SENTENCES.get(relation, '')}",
        ]

    # === 事业 ======================================================================================

    def has_jia_support(self) -> bool:
        """乙木日主见甲（年月时干透甲，或支见寅、亥）"""
        chart = self.chart
        stems = (chart.year.stem, chart.month.stem, chart.hour.stem)
        branches = tuple(p.branch for p in chart.pillars())
        return '甲' in stems or any(b in ('寅', '亥') for b in branches)

    def career_strategy(self) -> str:
        if self.chart.day.stem == '乙' and self.has_jia_support():
            return '【藤萝系甲】: 乙木为藤，甲木为松柏。宜寻找强有力的平台或合作伙伴，借势而上，不宜单打独斗。'
        if not self.is_strong:
            return '【借力使力】: 命局能量偏弱，职场上宜依靠团队与平台，多考取证书、多结交前辈同行，以资源弥补自身不足。'
        return '【独当一面】: 命局能量强旺，抗压与执行力出众，适合主动出击、承担核心责任，注意收敛锋芒。'

    def wealth_advice(self) -> str:
        stem_gods = (self.chart.year.ten_god, self.chart.month.ten_god, self.chart.hour.ten_god)
        if '偏财' in stem_gods:
            if self.is_strong:
                return '【偏财得用】: 命带偏财且身强，有投资眼光，适合副业、理财或经商。'
            return '【财多身弱】: 虽有偏财机遇，但自身难以驾驭，宜见好就收，与伙伴共同求财、分担风险。'
        if '正财' in stem_gods:
            return '【正财稳健】: 财源以本职薪资为主，宜深耕主业，稳健理财，不宜高风险投机。'
        if self.is_strong:
            return '【技艺生财】: 财星不显但身强有力，财富多来自专业技能与才华，一技之长即是财源。'
        return '【积少成多】: 财运需要积累，宜养成储蓄习惯，开源节流，逐步开辟财源。'

    def career(self) -> List[str]:
        return [
            '【行业选择】:',
            f"建议优先选择五行属 <{self.primary}> 的行业，例如：{texts.INDUSTRIES[self.primary]}。"
            f"其次可选择属 <{self.secondary}> 的行业。",
            '【职场策略】:',
            self.career_strategy(),
            '【财运规划】:',
            self.wealth_advice(),
        ]

    # === 情感 ======================================================================================

    def love(self) -> List[str]:
        chart = self.chart
        day_branch = chart.day.branch
        clash = BRANCH_CHONG[day_branch]
        month_clash = chart.month.branch == clash
        year_clash = chart.year.branch == clash

        if month_clash or year_clash:
            marriage = (
                f"正视“{day_branch}{clash}冲”：夫妻宫与{'月支' if month_clash else '年支'}相冲，"
                f"婚姻需要双方用心经营。"
            )
        else:
            marriage = '用心经营：夫妻宫无明显刑冲，平淡生活更需要仪式感来点缀。'

        if chart.day.stem in ('丙', '丁'):
            comms = '有效沟通：您性情热烈或细腻，容易急躁或多想，有话直说但要温和。'
        elif chart.day.stem in ('戊', '己', '甲', '乙'):
            comms = '有效沟通：您偏稳重内敛，不喜表达，但沉默解决不了问题，要把感受说出来。'
        else:
            comms = '有效沟通：保持真诚交流，不要让冷战消耗感情。'

        month_god = chart.month.hidden_ten_gods[0] if chart.month.hidden_ten_gods else ''
        parent = (
            f"与父母：月柱为父母宫。"
            f"{'逢冲，与父母聚少离多或管束较严。' if month_clash else '月柱稳健，父母是您的坚实后盾。'}"
        )
        if month_god == '七杀':
            parent += '月令坐七杀，父母可能较为严厉或期望很高。'

        hour_god = chart.hour.hidden_ten_gods[0] if chart.hour.hidden_ten_gods else ''
        child = f"与子女：时柱为子女宫，坐{hour_god}。"
        if hour_god in ('食神', '伤官'):
            child += '子女星得位，孩子聪明伶俐。'
        elif hour_god in ('七杀', '正官'):
            child += '子女个性较强，或您对子女管教较严。'
        else:
            child += '亲子关系平顺，晚年可享天伦之乐。'

        lines = [
            '【择偶标准】:',
            texts.PARTNER_TYPES[self.primary],
        ]
        if chart.day.stem == '乙' and self.has_jia_support():
            lines.append('藤萝系甲：伴侣很可能也是您事业上的依靠。')
        lines += ['【婚姻经营】:', marriage, comms]
        if month_clash:
            lines.append(f"保持距离美：适当的空间有助于缓和“{day_branch}{clash}冲”。")
        lines += [
            f"关注关键年份：逢{clash}年是感情的考验期，需加倍耐心。",
            '【家庭关系】:',
            parent,
            child,
        ]
        return lines

    # === 健康 ======================================================================================

    def core_health_issues(self) -> List[str]:
        issues = []
        scores = self.wuxing.scores
        strongest = self.wuxing.strongest
        # 并列最少时取五行顺序中最先者
        weakest = min(ELEMENTS, key=lambda element: scores[element])
        if scores[strongest] >= 3 and scores[weakest] <= 1 and get_element_relation(strongest, weakest) == 'me_controlling':
            issues.append(
                f"{strongest}{weakest}交战：强{strongest}克弱{weakest}。{weakest}{texts.ORGANS[weakest]}，"
                f"需终身提防{texts.SYMPTOMS[weakest]}等问题。"
            )

        month_branch = self.chart.month.branch
        if month_branch in ('亥', '子', '丑'):
            issues.append(f"寒湿过重：生于{month_branch}月，水寒土湿，易有腰膝酸软、体寒怕冷等问题。")
        elif month_branch in ('巳', '午', '未'):
            issues.append(f"火炎土燥：生于{month_branch}月，火旺土燥，易有心火旺、失眠多梦、皮肤干痒等问题。")

        if not issues:
            issues.append('五行流通：五行能量相对平衡，注意季节交替时的基础保养即可。')
        return issues

    def exercise_advice(self) -> str:
        if self.primary in ('火', '木'):
            return '适合能让身体发热出汗的运动，如慢跑、瑜伽、羽毛球，多晒太阳。'
        if self.primary in ('水', '金'):
            return '适合游泳、太极、散步等柔和舒展的运动，避免大汗伤津。'
        return '适合徒步、爬山、园艺等亲近自然的运动。'

    def health(self) -> List[str]:
        motto = '、'.join(
            word for element in ELEMENTS if element in self.favorable
            for word in texts.WELLNESS_PRINCIPLES[element]
        )
        if self.primary == '火':
            avoid = '忌食生冷寒凉，冰饮、螃蟹等务必节制。'
        elif self.primary == '水':
            avoid = '忌食辛辣燥热，烧烤、油炸、烈酒等少碰。'
        else:
            avoid = '少吃加工食品，保持饮食清淡。'

        return [
            '【核心病灶】:',
            *self.core_health_issues(),
            '【养生总则】:',
            f"“{motto}”",
            '【饮食建议】:',
            f"多食属{self.primary}、属{self.secondary}的食物：如{texts.FOODS[self.primary]}等。",
            avoid,
            '【运动建议】:',
            self.exercise_advice(),
            '【情志调摄】:',
            texts.EMOTION_ADVICE[self.wuxing.weakest],
            '【理疗建议】:',
            texts.THERAPY_HINTS[self.primary],
        ]

    # === 开运 ======================================================================================

    def advice(self) -> List[str]:
        unfavorable = [e for e in ELEMENTS if e not in self.favorable]
        info = texts.LUCKY_INFO
        primary_info = info[self.primary]
        return [
            '【有利方位】:',
            *(f"{info[e]['direction']}（{e}）：{info[e]['good']}" for e in self.favorable),
            '【不利方位】:',
            *(f"{info[e]['direction']}（{e}）：{info[e]['bad']}" for e in unfavorable),
            '【幸运色彩】:',
            *(f"{info[e]['color']}（{e}）：{'首选色' if e == self.primary else '次选色'}，能增强气场。" for e in self.favorable),
            '【幸运数字】:',
            *(f"{info[e]['number']}（五行属{e}）" for e in self.favorable),
            '【开运饰品】:',
            f"{primary_info['item']}；生肖吉祥物：{primary_info['animal']}。",
        ]

    # === 结语 ======================================================================================

    def is_late_bloomer(self) -> bool:
        """第四步大运之后出现 70 分以上的大运"""
        return any(p.score >= LATE_BLOOMER_SCORE for p in self.luck_pillars[3:])

    def life_message(self) -> List[str]:
        if self.is_late_bloomer():
            flow = '观您命盘，先抑后扬。早年的波折皆是磨砺，待时机一到，自当厚积薄发。'
        else:
            flow = '观您命盘，行云流水，自有节奏。顺境不骄，逆境不馁，便是大智慧。'

        if self.is_strong:
            nature = f"元神强旺，如{self.me}之势，中正刚毅。天行健，君子以自强不息。"
        else:
            nature = f"元神温润，如{self.me}之质，内敛含蓄。地势坤，君子以厚德载物。"

        return [
            '【结语】:',
            flow,
            nature,
            f"以“{self.primary}”为机锋：多向{texts.LUCKY_INFO[self.primary]['direction']}而行，"
            f"多亲近{texts.LUCKY_INFO[self.primary]['color']}之物，顺应天时地利。",
        ]


def render_analysis(
    chart: BaziChart,
    wuxing: ElementScores,
    is_strong: bool,
    luck_pillars: Sequence[LuckPillar],
) -> AnalysisSections:
    """默认文案渲染"""
    return BaziTextAnalyzer(chart, wuxing, is_strong, luck_pillars).render()
