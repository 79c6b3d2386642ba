"""Tests for submitting reminders from the user interface."""

import os

import pytest

from conftest import read_bytes

from Remindme.actions import SubmitStatus, submit
from Remindme.records import parse_record


def test_status_texts():
    assert SubmitStatus.EMPTY_MESSAGE.text == "⚠ Please enter the Reminder Message."
    assert SubmitStatus.EMPTY_TIME.text == "⚠ Please enter the Reminder Time."
    assert SubmitStatus.BAD_TIME_FORMAT.text == "⚠ Invalid time format. Use HH:mm."
    assert SubmitStatus.OK.text == "✅ Reminder saved!"
    assert SubmitStatus.DUPLICATE.text == "⚠ Reminder already exists."


def test_submit_saves_reminder(store, store_path):
    assert submit(store, 'Take pills', '09:00') is SubmitStatus.OK
    assert store.lines() == ['09:00 - Take pills']
    assert read_bytes(store_path) == ('09:00 - Take pills' + os.linesep).encode('UTF-8')


def test_submit_twice_is_duplicate(store):
    assert submit(store, 'Take pills', '09:00') is SubmitStatus.OK
    assert submit(store, 'Take pills', '09:00') is SubmitStatus.DUPLICATE
    assert len(store) == 1


def test_submit_trims_inputs(store):
    assert submit(store, '  Take pills  ', ' 09:00 ') is SubmitStatus.OK
    assert store.lines() == ['09:00 - Take pills']
    assert submit(store, 'Take pills', '09:00') is SubmitStatus.DUPLICATE


def test_message_with_separator_round_trips(store):
    assert submit(store, 'Walk - slowly', '18:30') is SubmitStatus.OK

    record = parse_record(store.lines()[0])
    assert record.message == 'Walk - slowly'
    assert record.minute_of_day == 18 * 60 + 30


@pytest.mark.parametrize('message, time_text, expected', [
    ('', '09:00', SubmitStatus.EMPTY_MESSAGE),
    ('   ', '09:00', SubmitStatus.EMPTY_MESSAGE),
    ('', '', SubmitStatus.EMPTY_MESSAGE),
    ('Take pills', '', SubmitStatus.EMPTY_TIME),
    ('Take pills', '   ', SubmitStatus.EMPTY_TIME),
    ('Take pills', '9:00', SubmitStatus.BAD_TIME_FORMAT),
    ('Take pills', '24:00', SubmitStatus.BAD_TIME_FORMAT),
    ('Take pills', '09:60', SubmitStatus.BAD_TIME_FORMAT),
    ('Take pills', 'noon', SubmitStatus.BAD_TIME_FORMAT),
])
def test_invalid_input_changes_nothing(store, store_path, message, time_text, expected):
    assert submit(store, message, time_text) is expected
    assert len(store) == 0
    assert not os.path.exists(store_path)


def test_bad_time_leaves_existing_file_untouched(store, store_path):
    submit(store, 'Take pills', '09:00')
    before = read_bytes(store_path)

    assert submit(store, 'Take pills', '9:00') is SubmitStatus.BAD_TIME_FORMAT

    assert store.lines() == ['09:00 - Take pills']
    assert read_bytes(store_path) == before


def test_line_breaks_in_message_are_flattened(store):
    assert submit(store, 'first\nsecond', '07:00') is SubmitStatus.OK
    assert store.lines() == ['07:00 - first second']


def test_no_duplicates_after_many_submissions(store):
    pairs = [('A', '09:00'), ('B', '09:00'), ('A', '09:00'), ('A', '10:00'),
             (' B ', '09:00'), ('C', '9:00'), ('A', '10:00')]
    for message, time_text in pairs:
        submit(store, message, time_text)

    lines = store.lines()
    assert len(lines) == len(set(lines))
    assert lines == ['09:00 - A', '09:00 - B', '10:00 - A']


def test_accepted_flag():
    assert SubmitStatus.OK.accepted
    assert SubmitStatus.DUPLICATE.accepted
    assert not SubmitStatus.EMPTY_MESSAGE.accepted
    assert not SubmitStatus.EMPTY_TIME.accepted
    assert not SubmitStatus.BAD_TIME_FORMAT.accepted
