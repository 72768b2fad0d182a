from __future__ import annotations
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional
import argparse
import logging

from roadcheck._io import DatasetLoadError, load_features
from roadcheck._report import summarize
from roadcheck.rules import RuleContext, get_rule, list_rules
from roadcheck.schema import Sign, TopologySegment, Verdict, Violation
from roadcheck.utils.config_resolve import load_yaml, resolve_config

LOG = logging.getLogger("roadcheck")

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = REPO_ROOT / "configs" / "checks.yaml"


def _setup_logger(verbose: bool) -> logging.Logger:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s: %(message)s")
    return logging.getLogger("roadcheck")


def reference_path_for(check_id: str, cfg: Dict[str, Any]) -> Path:
    rule_cls = get_rule(check_id)
    if rule_cls is None:
        raise ValueError(f"unknown check: {check_id}")
    key = "SIGNS_PATH" if rule_cls.id_kind == "sign" else "TOPOLOGY_PATH"
    return Path(cfg[key])


def run_check(
    check_id: str,
    cfg: Dict[str, Any],
    validations_path: Path,
    reference_path: Path,
    emit: Callable[[str], None] = print,
) -> List[Verdict]:
    """Load both collections, then evaluate every violation in order.

    Loading happens before any rule runs; a DatasetLoadError from either file
    aborts the run with nothing evaluated. An empty validations file ends the
    run before the reference file is read.
    """
    rule_cls = get_rule(check_id)
    if rule_cls is None:
        raise ValueError(f"unknown check: {check_id} (available: {sorted(list_rules())})")
    ref_label = "signs" if rule_cls.id_kind == "sign" else "topology"

    emit(f"Reading validations file: {validations_path}")
    validation_feats = load_features(validations_path)
    if not validation_feats:
        emit("No validations found in the file.")
        return []
    violations = [Violation.from_feature(f, rule_cls.id_kind) for f in validation_feats]

    emit(f"Reading {ref_label} file: {reference_path}")
    reference_feats = load_features(reference_path)
    if not reference_feats:
        emit(f"No {ref_label} found in the file.")
        return []
    parse = Sign.from_feature if rule_cls.id_kind == "sign" else TopologySegment.from_feature
    collection = tuple(parse(f) for f in reference_feats)

    LOG.debug("%s: %d violations against %d %s records", check_id, len(violations), len(collection), ref_label)
    rule = rule_cls(RuleContext(config=cfg), collection)
    verdicts: List[Verdict] = []
    for number, violation in enumerate(violations, start=1):
        for line in rule.header_lines(number, violation):
            emit(line)
        verdict = rule.evaluate(violation)
        for line in verdict.lines + rule.footer_lines(verdict):
            emit(line)
        verdicts.append(verdict)
    return verdicts


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Validate reported map violations against sign / topology GeoJSON.")
    ap.add_argument("--check", required=True, choices=sorted(list_rules()), help="which scenario to run")
    ap.add_argument("--validations", default="", help="validations GeoJSON (default: VALIDATIONS_PATH from config)")
    ap.add_argument("--signs", default="", help="signs GeoJSON (default: SIGNS_PATH from config)")
    ap.add_argument("--topology", default="", help="topology GeoJSON (default: TOPOLOGY_PATH from config)")
    ap.add_argument("--config", default=str(DEFAULT_CONFIG), help="YAML config with thresholds and paths")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    _setup_logger(args.verbose)
    cfg = resolve_config(load_yaml(Path(args.config)))
    if args.validations:
        cfg["VALIDATIONS_PATH"] = args.validations
    if args.signs:
        cfg["SIGNS_PATH"] = args.signs
    if args.topology:
        cfg["TOPOLOGY_PATH"] = args.topology

    validations_path = Path(cfg["VALIDATIONS_PATH"])
    reference_path = reference_path_for(args.check, cfg)
    try:
        verdicts = run_check(args.check, cfg, validations_path, reference_path)
    except DatasetLoadError as e:
        LOG.error("%s", e)
        return 1

    summary = summarize(verdicts)
    LOG.info("%s: %d verdict(s) %s", args.check, summary["total"], summary["by_status"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
