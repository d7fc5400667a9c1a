"""Runs the two-step sequence: image analysis, then storyboard rendering."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from google import genai

from schemas import AnalysisResult

from .analysis import analyze_image
from .config import Config
from .storyboard import generate_storyboard
from .utils.gemini_client import make_client

log = logging.getLogger(__name__)


@dataclass
class SequenceOutcome:
    result: AnalysisResult
    storyboard_image_url: str | None = None
    storyboard_error: str | None = None


class SequencePipeline:
    """Analysis followed by storyboard generation, with progress reporting.

    A storyboard failure is reported on the outcome and never discards the
    analysis result, so the storyboard step can be retried on its own.
    """

    def __init__(
        self,
        config: Config,
        client: genai.Client | None = None,
        progress_cb: Callable[[str], None] | None = None,
    ):
        self.config = config
        self.progress_cb = progress_cb or (lambda msg: None)
        self._client = client

    @property
    def client(self) -> genai.Client:
        # Created on first use so a missing key fails before any request.
        if self._client is None:
            self._client = make_client(self.config)
        return self._client

    async def step_analyze(self, image: str) -> AnalysisResult:
        """Stage 1: Analyze the reference image."""
        self.progress_cb("🎬 Stage 1/2: Analyzing reference image...")
        result = await analyze_image(image, config=self.config, client=self.client)

        self.progress_cb(f"  Logline: {result.narrative_arc.logline}")
        for s in result.shot_list:
            self.progress_cb(f"  Shot {s.id}: [{s.type}] {s.duration} — {s.description[:60]}")
        return result

    async def step_storyboard(self, result: AnalysisResult) -> str:
        """Stage 2: Render the 3x3 storyboard grid."""
        self.progress_cb("🖼 Stage 2/2: Rendering storyboard grid...")
        image_url = await generate_storyboard(result, config=self.config, client=self.client)
        self.progress_cb("  Storyboard ready.")
        return image_url

    async def run(self, image: str) -> SequenceOutcome:
        result = await self.step_analyze(image)
        outcome = SequenceOutcome(result=result)

        try:
            outcome.storyboard_image_url = await self.step_storyboard(result)
        except Exception as e:
            log.warning("Storyboard generation failed: %s", e)
            self.progress_cb(f"  ⚠ Storyboard generation failed: {e}")
            outcome.storyboard_error = str(e)

        return outcome
