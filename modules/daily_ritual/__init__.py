"""
Модуль ежедневного ритуала
"""
from .models import (
    MarkdownSections, ContentBlock, BlockTarget, PublishRequest, DailyRitualResponse
)
from .markdown import build_markdown_sections
from .publisher import CraftPublisher, build_blocks, build_publish_request
from .service import DailyRitualService

__all__ = [
    'MarkdownSections',
    'ContentBlock',
    'BlockTarget',
    'PublishRequest',
    'DailyRitualResponse',
    'build_markdown_sections',
    'CraftPublisher',
    'build_blocks',
    'build_publish_request',
    'DailyRitualService'
]
