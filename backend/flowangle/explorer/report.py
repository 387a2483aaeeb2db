"""Plain-text exploration report."""

from __future__ import annotations

from flowangle.explorer.classifier import Classification


def generate_report(classification: Classification) -> str:
    n = classification.sides
    lines = [
        "",
        f"PARAMETER SPACE EXPLORATION REPORT: n={n}",
        "=" * 60,
        "",
        f"Total Configurations Analyzed: {classification.total_configurations}",
        "",
        "EXTREMES:",
    ]

    for name, entry in classification.extremes.items():
        if entry is None:
            continue
        m = entry.metrics
        lines.append(f"  {name}:")
        lines.append(
            f"    HandleAngle: {entry.config.handle_angle:g}°, FlowFactor: {entry.config.flow_factor:g}"
        )
        lines.append(f"    Complexity: {m.complexity_score:.3f}, Simplicity: {m.simplicity_score:.3f}")
        lines.append(f"    Center: {m.center_dominance:.3f}, Roundness: {m.roundness:.3f}")
        lines.append("")

    lines.append("ARCHETYPES:")
    for name, entries in classification.archetypes.items():
        lines.append(f"  {name}: {len(entries)} configurations")
        if entries:
            top = entries[0].config
            lines.append(f"    Top: HandleAngle={top.handle_angle:g}°, FlowFactor={top.flow_factor:g}")

    return "\n".join(lines) + "\n"
