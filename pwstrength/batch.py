"""
Batch scoring and export.

Scores many candidates concurrently and writes JSON/CSV reports. Password
text is never written to a report; rows are identified by line number.
"""

import csv
import json
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, Iterable, List

from tqdm import tqdm

from .config import DEFAULT_SETTINGS
from .exceptions import PasswordFileError
from .labels import StrengthLabel
from .scoring import StrengthResult, StrengthScorer


logger = logging.getLogger(__name__)

CSV_FIELDS = ["line", "score", "label", "label_text", "raw_score"]


def score_many(passwords: Iterable[str],
               max_workers: int = DEFAULT_SETTINGS["max_workers"],
               progress: bool = False) -> List[StrengthResult]:
    """
    Score passwords concurrently.

    Args:
        passwords: Candidates to score
        max_workers: Thread pool size
        progress: Show a tqdm progress bar

    Returns:
        Results in the same order as `passwords`
    """
    passwords = list(passwords)
    scorer = StrengthScorer()
    results: List[StrengthResult] = [None] * len(passwords)

    with ThreadPoolExecutor(max_workers=max_workers) as ex:
        future_map = {ex.submit(scorer.score, pw): idx for idx, pw in enumerate(passwords)}
        for fut in tqdm(as_completed(future_map), total=len(future_map),
                        desc="Scoring", unit="pw", disable=not progress):
            results[future_map[fut]] = fut.result()

    logger.info(f"Scored {len(results)} passwords with {max_workers} workers")
    return results


def aggregate_results(results: List[StrengthResult]) -> Dict:
    """Aggregate scores across a batch."""
    scores = [r.score for r in results]
    label_counts = {label.value: 0 for label in StrengthLabel}
    for r in results:
        label_counts[r.label.value] += 1

    return {
        "total": len(results),
        "average_score": round(sum(scores) / len(scores), 2) if scores else 0.0,
        "min_score": min(scores) if scores else 0,
        "max_score": max(scores) if scores else 0,
        "labels": label_counts,
    }


def read_passwords(path: Path) -> List[str]:
    """
    Read one candidate per line. Blank lines are skipped.

    Only "\\n" ends a line; a carriage return inside a line is part of the
    candidate. A UTF-8 byte order mark at the start of the file is dropped.

    Raises:
        PasswordFileError: If the file is not valid UTF-8
    """
    try:
        with open(path, 'r', encoding='utf-8-sig', newline='\n') as f:
            lines = [line.rstrip("\r\n") for line in f]
    except UnicodeDecodeError as e:
        raise PasswordFileError(f"{path} is not valid UTF-8: {e.reason}") from e
    return [line for line in lines if line]


def build_rows(results: List[StrengthResult], locale: str = "en") -> List[Dict]:
    rows = []
    for line_no, result in enumerate(results, start=1):
        row = {"line": line_no, "raw_score": result.raw_score}
        row.update(result.to_dict(locale))
        rows.append(row)
    return rows


def export_json(rows: List[Dict], path: Path, summary: Dict = None):
    """Write rows (and an optional summary) as JSON."""
    data = {"results": rows}
    if summary is not None:
        data["summary"] = summary

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved JSON report to {path}")


def export_csv(rows: List[Dict], path: Path):
    """Write the flat score columns of each row as CSV."""
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)

    logger.info(f"Saved CSV report to {path}")
