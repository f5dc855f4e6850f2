from typing import List
import logging
from dataclasses import dataclass

@dataclass(frozen=True)
class ValidationIssue:
    path: str
    code: str       # e.g., "MISSING_SOURCE_IMAGE", "MISSING_TARGET_ROOT"
    severity: str   # "error" | "warning"
    message: str

def has_issues(issues: List[ValidationIssue], severity: str) -> bool:
    return any(i.severity == severity for i in issues)

def log_issues(issues: List[ValidationIssue], severity: str) -> bool:
    for issue in issues:
        (logging.error if issue.severity == severity else logging.warning)("❌ %s: %s", issue.code, issue.message)
    return has_issues(issues, severity)
