"""Markdown export for rendered calendar reports."""
import os
import sys
import markdown

def _markdown_mode(md_path: str, overwrite: bool) -> str:
    """Pick the open mode for ``md_path`` and announce what will happen to it."""
    if not os.path.exists(md_path):
        print(f"[INFO] Creating '{md_path}'.")
        return 'w'
    if overwrite:
        print(f"[INFO] Replacing existing '{md_path}' (--overwrite).")
        return 'w'
    print(f"[INFO] Appending the calendar to existing '{md_path}'.")
    return 'a'

def write_markdown(md_path: str, content: str, title: str, overwrite: bool = False):
    """Save a rendered report as Markdown and check that it still parses.

    A new or replaced file, or an empty existing one, gets ``title`` as its
    top-level heading; otherwise ``content`` is appended below what is there.

    Args:
        md_path: Output file path
        content: Rendered report
        title: Heading for a fresh file
        overwrite: Replace an existing file instead of appending

    Exits with status 2 if the file cannot be written and 3 if the result
    cannot be read back as Markdown.
    """
    mode = _markdown_mode(md_path, overwrite)
    needs_title = mode == 'w' or os.path.getsize(md_path) == 0

    try:
        with open(md_path, mode, encoding='utf-8') as f:
            if needs_title:
                f.write(f"# {title}\n\n")
            f.write(content)
    except OSError as e:
        print(f"[ERROR] Could not save calendar to '{md_path}': {e}", file=sys.stderr)
        sys.exit(2)

    try:
        with open(md_path, encoding='utf-8') as f:
            markdown.markdown(f.read())
    except (OSError, ValueError) as e:
        print(f"[ERROR] '{md_path}' is not valid Markdown: {e}", file=sys.stderr)
        sys.exit(3)
