import json
from pathlib import Path


def load_text(ifn):
    # keep \r so that character offsets match the annotations
    with open(ifn, "r", encoding="utf-8", newline="") as f:
        txt = f.read()
    return txt


def append_lines(lines, ofn):
    with open(ofn, "a", encoding="utf-8") as f:
        for line in lines:
            f.write(line)
            f.write("\n")


def recreate_file(ofn):
    """delete ofn if it exists and create it again as an empty file"""
    p = Path(ofn)
    p.parent.mkdir(parents=True, exist_ok=True)
    if p.exists():
        p.unlink()
    p.touch()
    return p


def save_json(data, file):
    with open(file, "w") as f:
        json.dump(data, f, indent=2)
