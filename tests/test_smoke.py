from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from csvtable import BoolEncodingStrategy, Column, EncoderConfiguration, Table

NL = "\\n"


@dataclass
class Episode:
    id: UUID
    title: str
    doctor: str
    aired: datetime
    rating: float
    missing: bool
    notes: Optional[str] = None


episodes = Table(
    [
        Column("ID", "id"),
        Column("Title", "title"),
        Column("Doctor", "doctor"),
        Column("First aired", "aired"),
        Column("Rating", "rating"),
        Column("Missing", "missing"),
        Column("Notes", "notes"),
    ],
    configuration=EncoderConfiguration(bool_strategy=BoolEncodingStrategy.integer()),
)


def test_export_episodes():
    rows = [
        Episode(
            id=UUID("00000000-0000-0000-0000-000000000001"),
            title="An Unearthly Child",
            doctor="William Hartnell",
            aired=datetime(1963, 11, 23, 17, 16, 20, tzinfo=timezone.utc),
            rating=8.5,
            missing=False,
            notes='Pilot was "remounted", then broadcast',
        ),
        Episode(
            id=UUID("00000000-0000-0000-0000-000000000002"),
            title=" The Tenth Planet",
            doctor="William Hartnell",
            aired=datetime(1966, 10, 8, 18, 45, tzinfo=timezone(timedelta(hours=1))),
            rating=7.25,
            missing=True,
        ),
    ]

    output = episodes.export(rows)

    assert output.split(NL) == [
        "ID,Title,Doctor,First aired,Rating,Missing,Notes",
        '00000000-0000-0000-0000-000000000001,An Unearthly Child,William Hartnell,'
        '1963-11-23T17:16:20Z,8.5,0,"Pilot was ""remounted"", then broadcast"',
        '00000000-0000-0000-0000-000000000002," The Tenth Planet",William Hartnell,'
        "1966-10-08T17:45:00Z,7.25,1,",
    ]


def test_export_is_pure():
    assert episodes.export([]) == episodes.export([])
    assert episodes.export([]) == "ID,Title,Doctor,First aired,Rating,Missing,Notes"
