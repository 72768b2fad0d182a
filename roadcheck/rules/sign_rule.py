from __future__ import annotations

from roadcheck._report import fmt_value
from roadcheck.rules.registry import BaseRule, register_rule
from roadcheck.schema import STATUS_FAIL, STATUS_INCONCLUSIVE, STATUS_PASS, Verdict, Violation


@register_rule("sign")
class SignRule(BaseRule):
    """Motorway sign check: type, EXISTENCE and CLASSIFICATION confidence, GFR group.

    Steps run in a fixed order and stop at the first failure, so a verdict
    never carries more than one failing criterion.
    """

    id_kind = "sign"

    def evaluate(self, violation: Violation) -> Verdict:
        sign_id = violation.extracted_id
        if sign_id is None:
            return self._no_id(violation)

        sign = self.index.get(sign_id)
        if sign is None:
            return self._verdict(
                STATUS_INCONCLUSIVE,
                "not_found",
                [f"Sign with ID {sign_id} not found in the signs dataset."],
                sign_id,
            )

        expected_type = self._cfg("EXPECTED_SIGN_TYPE", "MOTORWAY")
        expected_group = self._cfg("EXPECTED_GFR_GROUP", "Motorway")
        threshold = float(self._cfg("SCORE_THRESHOLD", 0.75))

        def fail(reason: str, line: str, **details) -> Verdict:
            return self._verdict(STATUS_FAIL, reason, [f"Sign {sign_id} fails: {line}"], sign_id, **details)

        if sign.sign_type != expected_type:
            return fail("sign_type", f'signType is {sign.sign_type} (expected "{expected_type}").', sign_type=sign.sign_type)

        for score_type in ("EXISTENCE", "CLASSIFICATION"):
            entry = sign.score(score_type)
            if entry is None:
                return fail(f"{score_type.lower()}_missing", f"No {score_type} score found.")
            # strict: a score equal to the threshold fails
            if entry.score is None or entry.score <= threshold:
                return fail(
                    f"{score_type.lower()}_score",
                    f"{score_type} score is {fmt_value(entry.score)} (expected > {fmt_value(threshold)}).",
                    score=entry.score,
                )

        if sign.gfr_group_name != expected_group:
            return fail(
                "gfr_group",
                f'gfrGroupName is {sign.gfr_group_name} (expected "{expected_group}").',
                gfr_group_name=sign.gfr_group_name,
            )

        return self._verdict(STATUS_PASS, "ok", [f"Sign {sign_id} passes all checks."], sign_id)
