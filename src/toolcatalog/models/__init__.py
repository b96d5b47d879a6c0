from toolcatalog.models.base import Base
from toolcatalog.models.tool import Tool, ToolDetail, BADGES, DETAIL_FIELDS

__all__ = ["Base", "Tool", "ToolDetail", "BADGES", "DETAIL_FIELDS"]
