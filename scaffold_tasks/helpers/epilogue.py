"""Closing banner printed after experimental commands."""

from scaffold_tasks.helpers.helpers_logging import Colors, colorize

TOPIC_URL_BASE = "https://community.redwoodjs.com/t"

_RULE = "-" * 66


def get_topic_url(topic_id: int) -> str:
    return f"{TOPIC_URL_BASE}/{topic_id}"


def print_task_epilogue(command: str, description: str, topic_id: int) -> None:
    """Print the experimental-feature banner with the feedback link."""
    print(colorize(_RULE, Colors.ORANGE))
    print(f" 🧪 {colorize('Experimental Feature', Colors.GREEN)} 🧪")
    print(colorize(_RULE, Colors.ORANGE))
    print(
        "Please find documentation and links to provide feedback for "
        f"{colorize(command, Colors.BOLD)} ({description}) at:"
    )
    print(f" -> {colorize(get_topic_url(topic_id), Colors.CYAN)}")
    print(colorize(_RULE, Colors.ORANGE))
