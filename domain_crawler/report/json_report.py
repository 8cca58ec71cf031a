# domain_crawler/report/json_report.py

"""
JSON report for DomainCrawler.

Serializes a CrawlReport into a file.
"""
import json
from pathlib import Path

from domain_crawler.aggregator import CrawlReport


def render_json(report: CrawlReport, output_path: Path | str) -> Path:
    """
    Write ``report`` as JSON to ``output_path``.

    :param report: CrawlReport of a finished crawl
    :param output_path: path of the JSON file
    :return: Path of the written file

    Example:
    ```python
    from domain_crawler.report.json_report import render_json
    report_path = render_json(report, 'reports/crawl.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)

    return output
