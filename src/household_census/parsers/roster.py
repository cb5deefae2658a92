"""CSV roster parser for bulk census entry."""

import csv
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from household_census.exceptions import (
    RosterError,
    RosterFileNotFoundError,
    RosterFormatError,
)


class RosterRole(str, Enum):
    HEAD = "head"
    MEMBER = "member"


@dataclass(frozen=True)
class RosterEntry:
    """One roster row. Person fields stay raw until validated."""

    line_number: int
    household: str
    role: RosterRole
    name: str
    gender: str
    dob: str

    def person_fields(self) -> dict[str, str]:
        return {"name": self.name, "gender": self.gender, "date_of_birth": self.dob}


class RosterParser:
    """Parser for household roster CSV files.

    Expected columns (case-insensitive, any order):
        household, role, name, gender, dob

    `household` is a free-form key tying members to the head row that
    precedes them; `role` is `head` or `member`. Blank lines are skipped.
    """

    REQUIRED_COLUMNS = ["household", "role", "name", "gender", "dob"]

    # Alternative header names
    COLUMN_ALIASES = {
        "house": "household",
        "house no": "household",
        "household id": "household",
        "relation": "role",
        "sex": "gender",
        "date of birth": "dob",
        "birth date": "dob",
        "date_of_birth": "dob",
    }

    ROLE_ALIASES = {
        "head": RosterRole.HEAD,
        "h": RosterRole.HEAD,
        "प्रमुख": RosterRole.HEAD,
        "member": RosterRole.MEMBER,
        "m": RosterRole.MEMBER,
        "सदस्य": RosterRole.MEMBER,
    }

    def parse(self, file_path: str | Path) -> list[RosterEntry]:
        """Parse a roster CSV file.

        Raises:
            RosterFileNotFoundError: If the file does not exist.
            RosterFormatError: On missing columns, an unknown role or text
                that is not UTF-8.
            RosterError: If the file cannot be read.
        """
        path = Path(file_path)
        if not path.exists():
            raise RosterFileNotFoundError(str(file_path))

        try:
            with open(path, newline="", encoding="utf-8-sig") as csvfile:
                return self.parse_lines(csvfile)
        except UnicodeDecodeError as e:
            raise RosterFormatError(
                f"roster is not valid UTF-8 text (byte {e.start}: {e.reason})"
            ) from e
        except OSError as e:
            raise RosterError(
                f"Cannot read roster {path}: {e.strerror or e}",
                context={"path": str(path)},
            ) from e

    def parse_lines(self, lines: Iterable[str]) -> list[RosterEntry]:
        """Parse CSV text from an open file or any iterable of lines.

        Quoted fields may span lines; `line_number` is the last physical
        line of the row.
        """
        reader = csv.reader(lines)
        header = next(reader, None)
        if header is None:
            return []

        columns = self._map_columns(header)
        entries: list[RosterEntry] = []

        for row in reader:
            line_number = reader.line_num
            if not any(cell.strip() for cell in row):
                continue
            values = {
                key: (row[index].strip() if index < len(row) else "")
                for key, index in columns.items()
            }
            entries.append(
                RosterEntry(
                    line_number=line_number,
                    household=values["household"],
                    role=self._parse_role(values["role"], line_number),
                    name=values["name"],
                    gender=values["gender"],
                    dob=values["dob"],
                )
            )

        return entries

    def _map_columns(self, header: list[str]) -> dict[str, int]:
        columns: dict[str, int] = {}
        for index, raw in enumerate(header):
            name = raw.strip().lower()
            name = self.COLUMN_ALIASES.get(name, name)
            if name in self.REQUIRED_COLUMNS and name not in columns:
                columns[name] = index

        missing = [col for col in self.REQUIRED_COLUMNS if col not in columns]
        if missing:
            raise RosterFormatError(
                f"missing required columns: {', '.join(missing)}", line_number=1
            )
        return columns

    def _parse_role(self, value: str, line_number: int) -> RosterRole:
        role = self.ROLE_ALIASES.get(value.strip().lower())
        if role is None:
            raise RosterFormatError(
                f"unknown role {value!r}, expected 'head' or 'member'",
                line_number=line_number,
            )
        return role
