import re
import pytest

from relation_snippets.data_utils import Token


NOTE_TEXT = "The patient took aspirin for pain. She was discharged after surgery today.\n"

NOTE_ANN = "\n".join([
    "T1\tEVENT 12 16\ttook",
    "T2\tEVENT 17 24\taspirin",
    "T3\tEVENT 29 33\tpain",
    "T4\tEVENT 43 53\tdischarged",
    "T5\tEVENT 60 67\tsurgery",
    "T6\tTIMEX3 68 73\ttoday",
    "R1\tCONTAINS Arg1:T3 Arg2:T1",
    "R2\tCONTAINS Arg1:T4 Arg2:T5",
    "A1\tPolarity T2 POS",
    ""
])


def whitespace_tokens(text):
    return [Token(m.start(), m.end(), m.group()) for m in re.finditer(r"\S+", text)]


@pytest.fixture()
def sentence_tokens():
    # The(0,3) patient(4,11) took(12,16) aspirin(17,24) for(25,28) pain(29,33)
    return whitespace_tokens("The patient took aspirin for pain")


def write_note(data_dir, name, text=NOTE_TEXT, ann=NOTE_ANN):
    (data_dir / "{}.txt".format(name)).write_text(text, encoding="utf-8")
    (data_dir / "{}.ann".format(name)).write_text(ann, encoding="utf-8")
    return data_dir / "{}.ann".format(name)


@pytest.fixture()
def brat_dir(tmp_path):
    data_dir = tmp_path / "notes"
    data_dir.mkdir()
    write_note(data_dir, "ID000_clinic_001")
    write_note(data_dir, "ID004_clinic_002")
    # patient 6 is a test patient and never printed
    write_note(data_dir, "ID006_clinic_003")
    return data_dir
