# -*- coding: utf-8 -*-
"""
locimport Utilities

Host integration: clipboard access and revealing saved files.
"""
