from __future__ import annotations


def build_guidance_message(*, what: str, why: str | None = None, fix: str | None = None, example: str | None = None) -> str:
    lines = [what]
    if why:
        lines.append(f"Why: {why}")
    if fix:
        lines.append(f"Fix: {fix}")
    if example:
        lines.append(f"Example: {example}")
    return "\n".join(lines)


def with_hint(message: str, hint: str) -> str:
    return f"{message}\n💡 {hint}"


__all__ = ["build_guidance_message", "with_hint"]
