"""
Timeline Utility Functions for speechline

This module provides functions to render and export session timelines made of
speech utterances and silence slots.

Functions:
    - save_timeline_to_csv: Saves the timeline to a CSV file.
    - save_timeline_to_json: Saves the numbered timeline records to a JSON file.
    - display_elapsed_time: Displays elapsed time in a formatted string.
    - format_timeline_as_text: Formats the timeline as numbered text lines.
    - print_timeline: Prints the timeline as a colorized table.
    - color_txt: Colorizes a string.
"""

import csv
import json
import logging
from pathlib import Path
from typing import Sequence

from colored import attr, bg, fg
from halo import Halo

from speechline.config import get_settings
from speechline.domain import TimelineEntry
from speechline.segmentation.pipeline import number_timeline
from speechline.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

CSV_HEADER: list[str] = [
    "Order",
    "Kind",
    "Speaker",
    "Start (s)",
    "End (s)",
    "Duration (s)",
    "Text",
]


def save_timeline_to_csv(
    timeline: Sequence[TimelineEntry],
    file_name: str,
    folder: str | Path | None = None,
) -> str:
    """
    Saves the timeline to a CSV file.

    Arguments:
        timeline (Sequence[TimelineEntry]): The timeline to be saved.
        file_name (str): Source transcript name; its stem names the CSV file.
        folder (str | Path | None): Target folder, defaults to the configured
            timeline folder.

    Returns:
        str: The path to the saved CSV file.
    """
    logger.info(msg="Starting to save timeline to CSV.")
    target_folder = Path(folder) if folder is not None else get_settings().timeline.folder
    target_folder.mkdir(parents=True, exist_ok=True)
    csv_path = target_folder / f"{Path(file_name).stem}.csv"

    with Halo(
        text=f"Saving timeline to {csv_path}",
        spinner="dots",
        text_color="green",
    ):
        with open(csv_path, mode="w", newline="", encoding="utf-8") as file:
            writer = csv.writer(file)
            writer.writerow(CSV_HEADER)
            logger.debug("Header written to CSV file.")

            for record in number_timeline(timeline):
                row = [
                    record["order"],
                    record["kind"],
                    record["speaker_id"] or "",
                    f"{record['start']:.2f}",
                    f"{record['end']:.2f}",
                    f"{record['duration']:.2f}",
                    record["text"],
                ]
                writer.writerow(row)
                logger.debug(msg=f"Written row: {row}")

    logger.info(msg=f"Timeline successfully saved to {csv_path}")
    return str(csv_path)


def save_timeline_to_json(
    timeline: Sequence[TimelineEntry], output_path: str | Path
) -> str:
    """Writes numbered timeline records to ``output_path`` as a JSON array."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with Halo(
        text=f"Saving timeline to {path}",
        spinner="dots",
        text_color="green",
    ):
        with open(path, mode="w", encoding="utf-8") as file:
            json.dump(number_timeline(timeline), file, ensure_ascii=False, indent=2)
    logger.info("Timeline JSON saved to %s", path)
    return str(path)


def display_elapsed_time(elapsed_time: float, _format: str = "long") -> str:
    """
    Returns the elapsed time in seconds in long or short format.

    Arguments:
        elapsed_time (float): Elapsed time in seconds.
        _format (str, optional): Format of the elapsed time
            ('long' or 'short'), by default 'long'.

    Returns:
        str: Formatted elapsed time.
    """
    minutes, seconds = divmod(int(elapsed_time), 60)
    if _format == "long":
        return (
            f"{minutes} min {seconds} seconds"
            if minutes
            else f"{elapsed_time} seconds"
        )
    return f"{minutes}m{seconds}s" if minutes else f"{elapsed_time:.2f}s"


def format_timeline_as_text(timeline: Sequence[TimelineEntry]) -> str:
    """
    Formats the timeline as one numbered line per entry.

    Example line: ``[01] speaker_0 | 0.00-1.00s     | Hello there.``

    Arguments:
        timeline (Sequence[TimelineEntry]): Timeline to format.

    Returns:
        str: Newline-joined lines, or an empty string for an empty timeline.
    """
    lines: list[str] = []
    for index, entry in enumerate(timeline, 1):
        time_range = f"{entry.start:.2f}-{entry.end:.2f}s"
        line = f"[{index:02d}] {entry.speaker_id} | {time_range:<14} | {entry.text}"
        lines.append(line.rstrip())
    return "\n".join(lines)


def color_txt(
    string: str, fg_color: str, bg_color: str, padding: int = 0
) -> str:
    """
    Colorizes a string.

    Arguments:
        string (str): String to be colorized.
        fg_color (str): Foreground color.
        bg_color (str): Background color.

    Returns:
        str: Colorized string.
    """
    if padding:
        string = string.ljust(padding)

    return f"{fg(fg_color)}{bg(bg_color)}{string}{attr('reset')}"


def print_timeline(timeline: Sequence[TimelineEntry]) -> None:
    """
    Prints the timeline as a table, one row per utterance or silence slot.

    Arguments:
        timeline (Sequence[TimelineEntry]): Timeline to print.
    """
    if not timeline:
        logger.info(msg="Timeline is empty, nothing to print.")
        return

    logger.info(msg=f"Printing timeline with {len(timeline)} entries.")
    time_strings: list[str] = [
        f"{display_elapsed_time(entry.start, _format='short')}"
        f"-{display_elapsed_time(entry.end, _format='short')}"
        for entry in timeline
    ]
    max_time_width: int = max(len("Time"), *(len(ts) for ts in time_strings))
    max_speaker_width: int = max(
        len("Speaker"), *(len(str(entry.speaker_id)) for entry in timeline)
    )

    print(color_txt("Time", "black", "green", max_time_width + 1), end="")
    print(color_txt("Speaker", "black", "yellow", max_speaker_width + 1), end="")
    print(color_txt("Speech", "black", "blue"))

    for time_str, entry in zip(time_strings, timeline):
        speaker_str: str = str(entry.speaker_id).ljust(max_speaker_width)
        if entry.kind == "silence":
            speaker_str = color_txt(speaker_str, "blue", "black")
            text_str = color_txt(f"({entry.duration:.2f}s silence)", "blue", "black")
        else:
            text_str = entry.text.strip()
        print(f"{time_str.ljust(max_time_width)} {speaker_str} {text_str}")
