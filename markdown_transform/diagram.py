"""Render a transformation graph as diagram source text.

Documentation tooling only: nothing here is on the transformation path.
"""

from collections.abc import Mapping

from .enums import DiagramFormat
from .value_objects import FormatDescriptor


def to_plantuml(formats: Mapping[str, FormatDescriptor]) -> str:
    """Render formats and edges as a PlantUML state diagram."""
    lines = ["@startuml", "hide empty description", ""]
    for name, descriptor in formats.items():
        lines.append(f"{name} : ")
        lines.append(f"{name} : {descriptor.docs}")
        for target in descriptor.targets:
            lines.append(f"{name} --> {target}")
        lines.append("")
    lines.append("@enduml")
    return "\n".join(lines)


def to_mermaid(formats: Mapping[str, FormatDescriptor]) -> str:
    """Render formats and edges as a Mermaid state diagram."""
    lines = ["stateDiagram-v2"]
    for name, descriptor in formats.items():
        lines.append(f"    {name} : {descriptor.docs}")
        for target in descriptor.targets:
            lines.append(f"    {name} --> {target}")
    return "\n".join(lines)


_RENDERERS = {
    DiagramFormat.PLANTUML: to_plantuml,
    DiagramFormat.MERMAID: to_mermaid,
}


def render_diagram(
    formats: Mapping[str, FormatDescriptor],
    diagram_format: DiagramFormat | str = DiagramFormat.PLANTUML,
) -> str:
    """Render formats in the requested diagram language.

    Raises:
        ValueError: If diagram_format is not a DiagramFormat value
    """
    return _RENDERERS[DiagramFormat(diagram_format)](formats)


__all__ = ["render_diagram", "to_plantuml", "to_mermaid"]
