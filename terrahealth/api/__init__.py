# -*- coding: utf-8 -*-
"""
云服务 API 客户端模块
"""
