"""
Static HTML watch page renderer.
"""

import html
import logging
from datetime import timezone, tzinfo
from pathlib import Path
from string import Template
from typing import Dict, List, Optional, Sequence, Set

from models.page import PageRegions
from models.video import Bucket, VideoRecord
from renderers.base import PageRenderer
from tools.render_tools import render_video_card

# Setup logging
logger = logging.getLogger(__name__)


DEFAULT_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Watch</title>
</head>
<body>
  <main>
    <section class="watch-section">
      <h2>Shorts</h2>
      $shorts_note
      $shorts_error
      $shorts_grid
    </section>
    <section class="watch-section">
      <h2>Full Episodes</h2>
      $episodes_note
      $episodes_error
      $episodes_grid
    </section>
  </main>
</body>
</html>
"""


class PageTemplateError(Exception):
    """Page template could not be loaded."""
    pass


class HtmlPageRenderer(PageRenderer):
    """Renders the watch page as a standalone HTML document.

    The page is a ``string.Template``: each region is a placeholder named
    after its ``PageRegions`` field (``$shorts_grid`` and so on). A region
    whose placeholder is missing from the template is not on the page and
    is skipped. A literal dollar sign is written as ``$$``.
    """

    def __init__(
        self,
        regions: Optional[PageRegions] = None,
        template: str = DEFAULT_PAGE_TEMPLATE,
        tz: Optional[tzinfo] = None
    ):
        self.regions = regions or PageRegions()
        self.template = Template(template)
        self.tz = tz or timezone.utc

        self._placeholders = self.regions.placeholders()
        self._present = self._template_identifiers() & set(self._placeholders.values())

        self._cards: Dict[str, List[str]] = {}
        self._text: Dict[str, str] = {}
        self._visible: Set[str] = set()

    @classmethod
    def from_file(
        cls,
        path: str,
        regions: Optional[PageRegions] = None,
        tz: Optional[tzinfo] = None
    ) -> "HtmlPageRenderer":
        """Load the page template from a file."""
        try:
            template = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise PageTemplateError(f"Cannot read page template {path}: {e}") from e
        return cls(regions=regions, template=template, tz=tz)

    def _template_identifiers(self) -> Set[str]:
        identifiers = set()
        for match in self.template.pattern.finditer(self.template.template):
            name = match.group("named") or match.group("braced")
            if name:
                identifiers.add(name)
        return identifiers

    def has_region(self, region_id: str) -> bool:
        """Check whether a region exists on this page."""
        return self._placeholders.get(region_id) in self._present

    def render_videos(self, region_id: str, videos: Sequence[VideoRecord], bucket: Bucket) -> None:
        if not self.has_region(region_id):
            logger.debug(f"Page has no region {region_id}, skipping {len(videos)} card(s)")
            return
        self._cards[region_id] = [render_video_card(video, bucket, self.tz) for video in videos]

    def set_note(self, region_id: str, text: str) -> None:
        if not self.has_region(region_id):
            return
        self._text[region_id] = text

    def show_error(self, region_id: str, message: str) -> None:
        if not self.has_region(region_id):
            return
        self._text[region_id] = message
        self._visible.add(region_id)

    def cards(self, region_id: str) -> List[str]:
        """Get the card markup currently in a grid region."""
        return list(self._cards.get(region_id, []))

    def text(self, region_id: str) -> str:
        """Get the text currently in a note or error region."""
        return self._text.get(region_id, "")

    def is_visible(self, region_id: str) -> bool:
        """Error regions stay hidden until an error is shown."""
        return region_id in self._visible

    def _render_grid(self, region_id: str) -> str:
        cards = "\n".join(self._cards.get(region_id, []))
        return f'<div id="{region_id}" class="video-grid">\n{cards}\n</div>'

    def _render_note(self, region_id: str) -> str:
        return f'<p id="{region_id}" class="section-note">{html.escape(self.text(region_id), quote=False)}</p>'

    def _render_error(self, region_id: str) -> str:
        display = "block" if self.is_visible(region_id) else "none"
        return (
            f'<div id="{region_id}" class="section-error" style="display: {display};">'
            f'{html.escape(self.text(region_id), quote=False)}</div>'
        )

    def to_html(self) -> str:
        """Serialise the page with the current region contents."""
        values = {}
        for region_id, placeholder in self._placeholders.items():
            if placeholder.endswith("_grid"):
                values[placeholder] = self._render_grid(region_id)
            elif placeholder.endswith("_error"):
                values[placeholder] = self._render_error(region_id)
            else:
                values[placeholder] = self._render_note(region_id)
        return self.template.safe_substitute(values)

    def write(self, path: str) -> Path:
        """Write the rendered page and return its path."""
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(self.to_html(), encoding="utf-8")
        logger.info(f"Wrote watch page to {output}")
        return output
