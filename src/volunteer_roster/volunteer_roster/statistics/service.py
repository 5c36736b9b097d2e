from __future__ import annotations

import logging

from ..common.datetime_utils import now_utc
from ..core.exceptions import UpstreamError
from .builder import build_statistics
from .export_client import ExportClient
from .layout import DEFAULT_LAYOUT, ExportLayout

logger = logging.getLogger(__name__)


class StatisticsService:
    def __init__(self, export: ExportClient, *, layout: ExportLayout = DEFAULT_LAYOUT):
        self._export = export
        self._layout = layout

    def get_statistics(self) -> dict:
        text = self._export.fetch_text()
        result = build_statistics(text, self._layout)
        if result is None:
            logger.error("Statistics export has no %r header row", self._layout.vocabulary.header)
            raise UpstreamError("Statistics export is malformed (header row not found)")

        result["updatedAt"] = now_utc().isoformat()
        return result
