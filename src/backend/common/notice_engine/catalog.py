from __future__ import annotations

import argparse
import json
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, Field

from .models import Authority
from .registry import registry

# Ensure built-in rules are imported/registered when generating a catalog.
from . import rules as _builtin_rules  # noqa: F401


class RuleCatalogEntry(BaseModel):
    rule_id: str
    rule_title: str
    jurisdiction_id: str
    notice_type: str

    module: str
    class_name: str

    config_model: str
    config_schema: Dict[str, Any]
    authorities: List[Authority] = Field(default_factory=list)


def build_catalog() -> List[RuleCatalogEntry]:
    entries: List[RuleCatalogEntry] = []
    for key in registry.keys():
        rule_cls = registry.get(key)
        cfg_model = getattr(rule_cls, "config_model", None)
        cfg_schema: Dict[str, Any] = {}
        cfg_model_name = ""
        if cfg_model is not None:
            cfg_model_name = cfg_model.__name__
            cfg_schema = cfg_model.model_json_schema()

        authorities = getattr(rule_cls, "authorities", None)
        entries.append(
            RuleCatalogEntry(
                rule_id=rule_cls.rule_id,
                rule_title=getattr(rule_cls, "rule_title", ""),
                jurisdiction_id=rule_cls.jurisdiction_id,
                notice_type=rule_cls.notice_type,
                module=rule_cls.__module__,
                class_name=rule_cls.__name__,
                config_model=cfg_model_name,
                config_schema=cfg_schema,
                authorities=list(authorities) if authorities is not None else [],
            )
        )

    entries.sort(key=lambda e: (e.jurisdiction_id, e.notice_type))
    return entries


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, sort_keys=True)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    return yaml.safe_dump(catalog, sort_keys=True, allow_unicode=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Generate a catalog of registered notice rule modules.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    args = parser.parse_args(argv)

    catalog = [e.model_dump(mode="json") for e in build_catalog()]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
