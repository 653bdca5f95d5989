"""samba-tool output parsing.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import re

from domain_controller.dns.dto import DNSEntryDTO, DNSRecordDTO, DNSZoneDTO

_ZONE_NAME_RE = re.compile(r"^\s*pszZoneName\s*:\s*(?P<name>\S+)\s*$")
_ZONE_FLAGS_RE = re.compile(r"^\s*Flags\s*:\s*(?P<flags>.*?)\s*$")
_NODE_RE = re.compile(
    r"^\s*Name=(?P<name>[^,]*),\s*Records=\d+,\s*Children=\d+\s*$",
)
_RECORD_RE = re.compile(
    r"^\s*(?P<type>[A-Za-z0-9]+):\s?(?P<value>.*?)\s*"
    r"\(flags=(?P<flags>[0-9a-fA-F]+),\s*serial=(?P<serial>\d+),"
    r"\s*ttl=(?P<ttl>\d+)\)\s*$",
)


class SambaToolResponseParser:
    """Parse text printed by samba-tool."""

    def parse_zones(self, output: str) -> list[DNSZoneDTO]:
        """Parse ``dns zonelist`` output.

        Each zone block starts with a ``pszZoneName`` line, an optional
        ``Flags`` line of the same block is kept.
        """
        zones: list[DNSZoneDTO] = []
        name: str | None = None
        flags: str | None = None

        for line in output.splitlines():
            if match := _ZONE_NAME_RE.match(line):
                if name is not None:
                    zones.append(DNSZoneDTO(name=name, flags=flags))
                name, flags = match["name"], None
            elif name is not None and (match := _ZONE_FLAGS_RE.match(line)):
                flags = match["flags"]

        if name is not None:
            zones.append(DNSZoneDTO(name=name, flags=flags))
        return zones

    def parse_entries(self, output: str) -> list[DNSEntryDTO]:
        """Parse ``dns query ... @ ALL`` output.

        Record lines belong to the last ``Name=`` line above them.
        """
        entries: list[DNSEntryDTO] = []
        current: DNSEntryDTO | None = None

        for line in output.splitlines():
            if match := _NODE_RE.match(line):
                current = DNSEntryDTO(name=match["name"].strip())
                entries.append(current)
            elif current is not None and (match := _RECORD_RE.match(line)):
                current.records.append(
                    DNSRecordDTO(
                        type=match["type"].upper(),
                        value=match["value"],
                        ttl=int(match["ttl"]),
                        serial=int(match["serial"]),
                        flags=match["flags"],
                    ),
                )

        return entries

    def parse_names(self, output: str) -> list[str]:
        """Parse ``user list`` and ``group list`` output."""
        return [line.strip() for line in output.splitlines() if line.strip()]
