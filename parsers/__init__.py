"""Line classification for pasted Arabic/English screenplay text."""

from parsers.line_classifier import classify_line
from parsers.scene_heading import parse_scene_heading
from parsers.script_processor import process_line, process_script

__all__ = ["classify_line", "parse_scene_heading", "process_line", "process_script"]
