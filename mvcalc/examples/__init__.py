# -*- coding: utf-8 -*-
"""
Calculus Kernel Examples
========================

Runnable walkthroughs of the kernel on classic textbook exercises.

Examples:
    01_limits_and_paths.py      - Limits along axis, diagonal and parabolic paths
    02_fields_and_extrema.py    - Gradients, conservative fields, critical points
"""
