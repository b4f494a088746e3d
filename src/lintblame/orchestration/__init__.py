# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Analysis dispatch and the polling controller."""

from .controller import CycleController, CycleState, Presenter
from .dispatcher import AnalysisDispatcher, ResultOrder

__all__ = ["AnalysisDispatcher", "CycleController", "CycleState", "Presenter", "ResultOrder"]
