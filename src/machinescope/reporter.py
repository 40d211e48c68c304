from datetime import datetime, timezone
from pathlib import Path

import humanize
import jinja2
from weasyprint import HTML

from .schemas.machine_type import GCPMachineType

OUTPUT_FORMATS = ("html", "pdf")


def humanize_mb(value: int | None) -> str:
    if not value:
        return "0 Bytes"
    return str(humanize.naturalsize(value * 1024 * 1024, binary=True))


def render_report(machine_types: list[GCPMachineType]) -> str:
    template_dir = Path(__file__).parent / "templates"
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        autoescape=jinja2.select_autoescape(["html", "xml"]),
    )
    env.filters["humanize_mb"] = humanize_mb

    template = env.get_template("report.html")
    return template.render(
        machine_types=machine_types,
        generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
    )


def generate_report(
    machine_types: list[GCPMachineType],
    output_path: str,
    output_format: str = "html",
) -> None:
    """
    Writes a spec sheet for the given machine types as HTML or PDF.
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported report format '{output_format}' "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
        )

    html_content = render_report(machine_types)

    if output_format == "pdf":
        HTML(string=html_content).write_pdf(output_path)
    else:
        Path(output_path).write_text(html_content, encoding="utf-8")
