"""Documentation validation and quality checks."""

from __future__ import annotations

from collections import Counter

from .models import ExtractionResult, ValidationResult


def validate_docs(
    results: list[ExtractionResult],
    strict: bool = False,
) -> ValidationResult:
    """Validate extracted documentation.

    Checks:
    1. Every block has a name (header needs a colon)
    2. Names are unique within a source
    3. Parameters have a name, a type and a description (warning)
    4. No lines were ignored after the tags (warning)

    Checks 1 and 2 are errors in strict mode and warnings otherwise.

    Args:
        results: Extraction results, one per source
        strict: If True, missing and duplicate names are errors

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    def report(msg: str) -> None:
        if strict:
            result.errors.append(msg)
        else:
            result.warnings.append(msg)

    for r in results:
        names = Counter(f.name for f in r.functions if f.name)
        for name, count in sorted(names.items()):
            if count > 1:
                report(f"{r.source}: {name} documented {count} times")

        for doc in r.functions:
            where = f"{r.source}:{doc.line_number}"

            if not doc.name:
                report(f"{where}: missing name (header has no 'name:' prefix)")
                label = "<unnamed>"
            else:
                label = doc.name

            for param in doc.parameters:
                if not param.name:
                    result.warnings.append(f"{where}: {label}: @param without a name")
                    continue
                if not param.types:
                    result.warnings.append(
                        f"{where}: {label}: @param {param.name} has no type"
                    )
                if not param.description:
                    result.warnings.append(
                        f"{where}: {label}: @param {param.name} has no description"
                    )

            if doc.returns is not None and not doc.returns.types:
                result.warnings.append(f"{where}: {label}: @return has no type")

            for line in doc.ignored:
                result.warnings.append(f"{where}: {label}: ignored line {line!r}")

    return result


def compute_coverage(results: list[ExtractionResult]) -> dict[str, float]:
    """Compute documentation coverage.

    Returns:
        Dict with 'described' (functions with a description) and
        'params' (parameters with a description) coverage (0.0 - 1.0)
    """
    functions = [f for r in results for f in r.functions]
    params = [p for f in functions for p in f.parameters]

    described = sum(1 for f in functions if any(line.strip() for line in f.description))
    params_described = sum(1 for p in params if p.description)

    return {
        "described": described / len(functions) if functions else 1.0,
        "params": params_described / len(params) if params else 1.0,
    }
