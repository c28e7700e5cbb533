"""Voice-guided generation loop around an external text generator."""

import logging
from typing import Callable, Iterable, Optional

from ..config import DEFAULT_CONFIG, VoiceEngineConfig
from ..errors import ProfileNotFound
from ..models.characteristics import VoiceCharacteristics
from ..models.generation import VoiceComparison, VoiceGenerationRequest, VoiceGenerationResult
from ..models.profile import BrandVoiceProfile
from ..profile.builder import get_active_profile
from ..scoring.scorer import AlignmentScorer
from .prompt import build_revision_prompt, build_voice_prompt

logger = logging.getLogger(__name__)

# generate(prompt, characteristics, constraints) -> text
TextGenerator = Callable[[str, VoiceCharacteristics, dict], str]


class VoiceGuidedGenerator:
    """
    Generates content through a caller-supplied generator and keeps
    regenerating while the draft's voice alignment is below threshold.

    The generator is any callable ``generate(prompt, characteristics,
    constraints) -> str``; errors it raises propagate unchanged.
    """

    def __init__(
        self,
        generate: TextGenerator,
        scorer: Optional[AlignmentScorer] = None,
        config: Optional[VoiceEngineConfig] = None,
    ):
        self.config = config or DEFAULT_CONFIG
        self._generate = generate
        self.scorer = scorer or AlignmentScorer(self.config)

    def generate(
        self,
        request: VoiceGenerationRequest,
        profile: BrandVoiceProfile,
    ) -> VoiceGenerationResult:
        """Generate, score and regenerate up to ``max_generation_attempts`` times."""
        characteristics = profile.characteristics
        base_prompt, applied = build_voice_prompt(request, characteristics)
        constraints = {
            "content_type": request.content_type.value,
            "target_length": request.target_length,
            "additional_instructions": request.additional_instructions,
        }

        best: Optional[VoiceComparison] = None
        prompt = base_prompt
        attempts = 0
        while attempts < self.config.max_generation_attempts:
            attempts += 1
            draft = self._generate(prompt, characteristics, constraints)
            comparison = self.scorer.score(draft, profile)
            logger.debug("Attempt %d for profile %s: alignment %.3f", attempts, profile.id, comparison.overall)

            if best is None or comparison.overall > best.overall:
                best = comparison
            if comparison.overall >= self.config.alignment_threshold:
                break
            prompt = build_revision_prompt(base_prompt, comparison)

        logger.info(
            "Generated %s content for profile %s in %d attempt(s), alignment %.3f",
            request.content_type.value, profile.id, attempts, best.overall,
        )
        return VoiceGenerationResult(
            content=best.generated_content,
            voice_alignment=best.overall,
            applied_characteristics=applied,
            suggestions=best.improvements or None,
            attempts=attempts,
        )

    def generate_for_owner(
        self,
        request: VoiceGenerationRequest,
        profiles: Iterable[BrandVoiceProfile],
        owner_id: str = "default",
    ) -> VoiceGenerationResult:
        """
        Resolve the request's profile (or the owner's active one) and generate.

        Raises:
            ProfileNotFound: the requested profile id is unknown
            ProfileNotActive: no profile id given and the owner has no active profile
        """
        profiles = list(profiles)
        if request.voice_profile_id is None:
            profile = get_active_profile(profiles, owner_id)
        else:
            profile = next((p for p in profiles if p.id == request.voice_profile_id), None)
            if profile is None:
                raise ProfileNotFound(f"No profile with id {request.voice_profile_id!r}")
        return self.generate(request, profile)
