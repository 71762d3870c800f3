"""Configuration loading and parsing for a11ylint."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from a11ylint.rules import PACKS

logger = logging.getLogger("a11ylint")

CONFIG_FILENAMES = ["a11ylint.yml", "a11ylint.yaml", ".a11ylint.yml"]

DEFAULT_MAX_NODES = 5

DEFAULT_CONFIG_TEMPLATE = """\
# a11ylint configuration
# packs: core (basic checks), extended (heuristic and structural checks)
packs:
  - core
  - extended

# Findings kept per rule in the report
max_nodes: 5

rules:
  color-contrast:
    max_findings: 10
  # table-caption:
  #   surface: true
  # meta-viewport:
  #   enabled: false
"""


@dataclass
class A11yLintConfig:
    """Parsed a11ylint configuration."""
    packs: list[str] = field(default_factory=lambda: list(PACKS))
    rules: dict[str, dict] = field(default_factory=dict)
    max_nodes: int = DEFAULT_MAX_NODES

    def is_rule_enabled(self, rule_id: str) -> bool:
        rule_cfg = self.rules.get(rule_id, {})
        return rule_cfg.get("enabled", True)

    def get_rule_config(self, rule_id: str) -> dict:
        return self.rules.get(rule_id, {})

    def is_rule_surfaced(self, rule_id: str, default: bool) -> bool:
        return self.get_rule_config(rule_id).get("surface", default)


def find_config_file(project_dir: str) -> Path | None:
    root = Path(project_dir)
    for filename in CONFIG_FILENAMES:
        config_path = root / filename
        if config_path.exists():
            return config_path
    return None


def load_config(project_dir: str) -> A11yLintConfig:
    """Load config from a11ylint.yml, falling back to defaults."""
    raw = {}
    config_path = find_config_file(project_dir)
    if config_path is not None:
        try:
            raw = yaml.safe_load(config_path.read_text()) or {}
        except yaml.YAMLError:
            logger.warning("Invalid YAML in %s, using defaults", config_path)
            raw = {}
    if not isinstance(raw, dict):
        logger.warning("Config in %s is not a mapping, using defaults", config_path)
        raw = {}

    packs = raw.get("packs") or list(PACKS)
    if isinstance(packs, str):
        packs = [packs]
    elif not isinstance(packs, list):
        logger.warning("Invalid packs '%s', falling back to %s", packs, list(PACKS))
        packs = list(PACKS)
    for p in packs:
        if p not in PACKS:
            logger.warning("Unknown pack '%s' in config (not registered)", p)

    max_nodes = raw.get("max_nodes", DEFAULT_MAX_NODES)
    if not isinstance(max_nodes, int) or isinstance(max_nodes, bool) or max_nodes < 1:
        logger.warning("Invalid max_nodes '%s', falling back to %d", max_nodes, DEFAULT_MAX_NODES)
        max_nodes = DEFAULT_MAX_NODES

    rules = raw.get("rules") or {}
    if not isinstance(rules, dict):
        logger.warning("Ignoring 'rules' section: expected a mapping")
        rules = {}

    rule_configs: dict[str, dict] = {}
    for rule_id, cfg in rules.items():
        if cfg is None:
            cfg = {}
        elif not isinstance(cfg, dict):
            logger.warning("Ignoring config for rule %s: expected a mapping", rule_id)
            cfg = {}
        rule_configs[rule_id] = cfg

    return A11yLintConfig(
        packs=list(packs),
        rules=rule_configs,
        max_nodes=max_nodes,
    )
