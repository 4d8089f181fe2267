"""
Text rendering of probe results for the health_check tool.
"""

from say_hello.health.probe import ProbeResult

SUCCESS_HEADER = "Health check successful!"
FAILURE_HEADER = "Health check failed!"


def format_probe_result(result: ProbeResult) -> str:
    """
    Render a probe result as the health_check response text.

    Args:
        result: The result to render

    Returns:
        The success text with the Gemini output (and a warnings section when
        stderr was non-empty), or the failure text with the error message
    """
    if result.success:
        text = f"{SUCCESS_HEADER}\n\nGemini response:\n{result.output}"
        if result.warnings:
            text += f"\n\nWarnings:\n{result.warnings}"
        return text

    return format_failure(result.error or "Unknown error")


def format_failure(message: str) -> str:
    return f"{FAILURE_HEADER}\n\nError: {message}"
