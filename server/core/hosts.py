# server/core/hosts.py

import logging
import os
from pathlib import Path
from typing import NamedTuple

from core.errors import StoreError
from core.state import with_store_lock


logger = logging.getLogger(__name__)


class HostRecord(NamedTuple):
    hostname: str
    ip: str

    def to_dict(self) -> dict:
        return {"host": self.hostname, "ip": self.ip}


def parse_line(line: str) -> HostRecord | None:
    """
    Parses one "<ip> <hostname>" line.
    Returns None for lines without a space separator.
    """
    fields = line.split(" ")
    if len(fields) < 2:
        return None
    return HostRecord(hostname=fields[1], ip=fields[0])


def format_line(ip: str, hostname: str) -> str:
    return f"{ip} {hostname}\n"


# -------------------------------
# Flat-file record store
# -------------------------------

class HostStore:
    """
    Host records kept in a line-oriented text file, one "<ip> <hostname>"
    per line. Every operation re-reads the file; there is no in-memory copy.

    Mutations (and the existence checks that guard them) must run while
    holding `lock`, which is shared by all stores opened on the same file.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.lock = with_store_lock(self.path.resolve())

    def _read_lines(self) -> list[str]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return f.read().splitlines()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StoreError(f"cannot read {self.path}: {e}") from e

    def list_hosts(self) -> list[HostRecord]:
        records = []
        for number, line in enumerate(self._read_lines(), start=1):
            if line == "":
                continue
            record = parse_line(line)
            if record is None:
                logger.warning("Skipping malformed line %d in %s: %r", number, self.path, line)
                continue
            records.append(record)
        return records

    def host_exists(self, hostname: str) -> bool:
        return any(record.hostname == hostname for record in self.list_hosts())

    def append_host(self, ip: str, hostname: str) -> None:
        line = format_line(ip, hostname).encode("utf-8")
        try:
            with self.path.open("a+b") as f:
                # terminate a hand-edited last line before appending
                if f.seek(0, os.SEEK_END) > 0:
                    f.seek(-1, os.SEEK_END)
                    if f.read(1) != b"\n":
                        line = b"\n" + line
                f.write(line)
        except OSError as e:
            raise StoreError(f"cannot append to {self.path}: {e}") from e

    def delete_host(self, hostname: str) -> None:
        remaining = []
        for line in self._read_lines():
            if line == "":
                continue
            record = parse_line(line)
            if record is not None and record.hostname == hostname:
                continue
            remaining.append(line + "\n")

        try:
            with self.path.open("w", encoding="utf-8") as f:
                f.writelines(remaining)
        except OSError as e:
            raise StoreError(f"cannot rewrite {self.path}: {e}") from e
