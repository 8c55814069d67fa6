#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core runtime: component wiring, signals and cleanup
"""
