#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Startup setup: arguments and logging
"""
