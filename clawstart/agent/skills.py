"""Skills: starter set defaults and the loader that decides which skills an agent gets.

Two skill layers:
- **Bundled skills** (`clawstart/skills/`): ship inside the package.
- **Workspace skills** (`<workspace>/skills/`): per-agent, override bundled
  skills with the same name.

A skill is a directory holding a `SKILL.md` with YAML frontmatter. Runtime
requirements live under `metadata.openclaw.requires`, `metadata.requires`,
or a top-level `requires` block.
"""

from __future__ import annotations

import os
import re
import shutil
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from clawstart.config import Config, SkillsConfig

BUNDLED_SKILLS_DIR = Path(__file__).resolve().parent.parent / "skills"

# Starter skills curated for consumer users: no or widely available binary
# deps, useful to non-technical users, cross-platform where possible.
STARTER_SKILL_KEYS: tuple[str, ...] = (
    "weather",
    "summarize",
    "github",
    "session-logs",
    "canvas",
    "skill-creator",
    "healthcheck",
    "nano-pdf",
    "video-frames",
    "gifgrep",
    "openai-whisper-api",
    "openai-image-gen",
    "notion",
    "apple-notes",
    "apple-reminders",
    "goplaces",
)

STARTER_SKILL_KEY_SET: frozenset[str] = frozenset(STARTER_SKILL_KEYS)


def apply_default_starter_skills(config: Config) -> Config:
    """Turn on the starter set so qualifying starter skills are auto-included."""
    skills = config.skills.model_copy(update={"starter_set": True})
    return config.copy_with(skills=skills)


def missing_requirements(meta: dict[str, Any]) -> list[str]:
    """List unmet runtime requirements (binaries, env vars) for a skill."""
    requires = meta.get("requires", {})
    if not isinstance(requires, dict):
        return []

    missing = [f"CLI: {b}" for b in requires.get("bins", []) if not shutil.which(b)]
    any_bins = requires.get("anyBins", [])
    if any_bins and not any(shutil.which(b) for b in any_bins):
        missing.append(f"CLI (any): {', '.join(any_bins)}")
    missing.extend(f"ENV: {env}" for env in requires.get("env", []) if not os.environ.get(env))
    return missing


def should_include_skill(name: str, meta: dict[str, Any], skills_config: SkillsConfig) -> bool:
    """Decide whether a discovered skill is offered to the agent."""
    entry = skills_config.entries.get(name)
    if entry is not None and entry.enabled is False:
        return False
    if missing_requirements(meta):
        return False
    if entry is not None and entry.enabled:
        return True
    if skills_config.starter_set and name in STARTER_SKILL_KEY_SET:
        return True
    return bool(meta.get("always"))


class SkillsLoader:
    """Discovers SKILL.md skills and filters them against the skills config."""

    def __init__(self, workspace: Path, skills_config: SkillsConfig | None = None, bundled_skills_dir: Path | None = None):
        self.workspace = workspace
        self.workspace_skills = workspace / "skills"
        self.bundled_skills = bundled_skills_dir or BUNDLED_SKILLS_DIR
        self.skills_config = skills_config or SkillsConfig()

    def discover(self) -> list[dict[str, str]]:
        found: dict[str, dict[str, str]] = {}
        for source, root in (("workspace", self.workspace_skills), ("bundled", self.bundled_skills)):
            if not root or not root.exists():
                continue
            for skill_dir in sorted(root.iterdir()):
                skill_file = skill_dir / "SKILL.md"
                if skill_dir.is_dir() and skill_file.exists() and skill_dir.name not in found:
                    found[skill_dir.name] = {"name": skill_dir.name, "path": str(skill_file), "source": source}
        return list(found.values())

    def list_skills(self) -> list[dict[str, str]]:
        """Skills the agent actually gets."""
        included = []
        for skill in self.discover():
            meta = self.get_skill_meta(skill["name"])
            if should_include_skill(skill["name"], meta, self.skills_config):
                included.append(skill)
            else:
                logger.debug(f"Skill '{skill['name']}' excluded")
        return included

    def load_skill(self, name: str) -> str | None:
        for root in (self.workspace_skills, self.bundled_skills):
            path = root / name / "SKILL.md"
            if path.exists():
                return path.read_text(encoding="utf-8")
        return None

    def get_frontmatter(self, name: str) -> dict[str, Any]:
        content = self.load_skill(name)
        if not content:
            return {}
        match = re.match(r"^---\n(.*?)\n---", content, re.DOTALL)
        if not match:
            return {}
        try:
            data = yaml.safe_load(match.group(1))
        except yaml.YAMLError as e:
            logger.debug(f"Bad frontmatter in skill '{name}': {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get_skill_meta(self, name: str) -> dict[str, Any]:
        """Return the block holding `requires`/`always` for a skill."""
        front = self.get_frontmatter(name)
        raw = front.get("metadata", {})
        if not isinstance(raw, dict):
            raw = {}
        if isinstance(raw.get("openclaw"), dict):
            return raw["openclaw"]
        if "requires" in raw:
            return raw
        if isinstance(front.get("requires"), dict) or "always" in front:
            return front
        return raw

    def build_skills_summary(self) -> str:
        lines = []
        for skill in self.list_skills():
            desc = self.get_frontmatter(skill["name"]).get("description") or skill["name"]
            lines.append(f"- {skill['name']}: {' '.join(str(desc).split())}")
        return "\n".join(lines)
