# -*- coding: utf-8 -*-
"""
八字基础数据表

天干、地支、五行、藏干等固定对照表，进程内只读。
"""
