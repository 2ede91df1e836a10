# -*- coding: utf-8 -*-
from .breakdown import BreakdownElementSet, CATEGORIES, ELEMENT_COLORS
from .request import (
	AnalysisRequest,
	AnalysisResult,
	CallState,
	PayloadShape,
	TaskKind,
	TASK_LABELS,
	TASK_SHAPES,
)
from .shot import SHOT_DEFAULTS, ShotRecord, new_shot, new_shot_id

__all__ = [
	"AnalysisRequest",
	"AnalysisResult",
	"BreakdownElementSet",
	"CATEGORIES",
	"CallState",
	"ELEMENT_COLORS",
	"PayloadShape",
	"SHOT_DEFAULTS",
	"ShotRecord",
	"TASK_LABELS",
	"TASK_SHAPES",
	"TaskKind",
	"new_shot",
	"new_shot_id",
]
