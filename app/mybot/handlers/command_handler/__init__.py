# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/13 13:58
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
from .start_command import start_command, help_command
from .flip_command import flip_command, direction_command

__all__ = ["start_command", "help_command", "flip_command", "direction_command"]
