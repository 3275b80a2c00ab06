"""Generate a Python module with Unicode ID_Start / ID_Continue tables from DerivedCoreProperties.txt."""

from __future__ import annotations

import re
import sys
import urllib.request
from pathlib import Path
from typing import Iterable, List, Optional, Set

BASE_URL = "https://unicode.org/Public"
FILENAME = "DerivedCoreProperties.txt"

_VERSION_PATTERN = re.compile(r"DerivedCoreProperties-(\d+\.\d+\.\d+).txt")

_MODULE_TEMPLATE = '''{pragma}

from bisect import bisect_right

UNICODE_VERSION = "{version}"

ID_START_RANGES = tuple(sorted((
    {start}
)))

ID_CONTINUE_RANGES = tuple(sorted((
    {cont}
)))

_START_KEYS = tuple(start for start, _ in ID_START_RANGES)
_CONTINUE_KEYS = tuple(start for start, _ in ID_CONTINUE_RANGES)


def _in_ranges(ranges, keys, cp):
    index = bisect_right(keys, cp) - 1
    return index >= 0 and cp <= ranges[index][1]


def is_unicode_id_start(ch):
    """Return True if the character has the ID_Start property."""
    return _in_ranges(ID_START_RANGES, _START_KEYS, ord(ch))


def is_unicode_id_continue(ch):
    """Return True if the character has the ID_Continue property."""
    if is_unicode_id_start(ch):
        return True
    return _in_ranges(ID_CONTINUE_RANGES, _CONTINUE_KEYS, ord(ch))
'''


def download_derived_core_properties(version: str) -> str:
    """Fetch the DerivedCoreProperties file for a Unicode version, or the latest for "UNIDATA"."""
    if version == "UNIDATA":
        url = f"{BASE_URL}/{version}/{FILENAME}"
    else:
        url = f"{BASE_URL}/{version}/ucd/{FILENAME}"

    print(f"Downloading `{url}`...")
    with urllib.request.urlopen(url) as response:
        text = response.read().decode("utf-8")
    print(f"Finished downloading `{url}`")
    return text


def extract_derived_core_properties(contents: str, derived_property: str) -> Set[str]:
    """Collect the code point fields of every data line whose property matches."""
    code_points: Set[str] = set()
    for row in contents.splitlines():
        if not row or row.startswith("#"):
            continue
        fields = row.split("#", 1)[0].split(";")
        if len(fields) < 2:
            raise ValueError(f"Malformed property line: {row!r}")
        code_point_range = fields[0].strip()
        prop = fields[1].strip()
        if prop == derived_property:
            code_points.add(code_point_range)
    return code_points


def extract_version(contents: str) -> Optional[str]:
    """Return the Unicode version named in the file header, if any."""
    match = _VERSION_PATTERN.search(contents)
    return match.group(1) if match else None


def remove_duplicate_code_points(first: Iterable[str], second: Iterable[str]) -> Set[str]:
    """Return the entries of ``second`` that are not in ``first``."""
    return set(second) - set(first)


def get_code_points(code_points: Iterable[str]) -> str:
    """Format code point entries as sorted Python tuple literals, one per line."""
    formatted: List[str] = []
    for code_point in code_points:
        if ".." in code_point:
            start, end = code_point.split("..")[:2]
        else:
            start = end = code_point
        formatted.append(f"(0x{start}, 0x{end}),")
    formatted.sort()
    return "\n    ".join(formatted)


def generate_pragma(version: str) -> str:
    """Return the docstring header of the generated module."""
    return (
        '"""\n'
        "This file is generated. Do not modify it manually!\n"
        "\n"
        "This file was generated by: `glyn.generate`\n"
        "\n"
        "Unicode Version:\n"
        f"  {version}\n"
        '"""'
    )


def write_module(
    output: str,
    start_code_points: Iterable[str],
    continue_code_points: Iterable[str],
    version: str,
) -> None:
    """Write the generated module with both property tables to ``output``."""
    print(f"Creating file at: `{output}`...")
    start = set(start_code_points)
    data = _MODULE_TEMPLATE.format(
        pragma=generate_pragma(version),
        version=version,
        start=get_code_points(start),
        cont=get_code_points(remove_duplicate_code_points(start, continue_code_points)),
    )
    Path(output).write_text(data, encoding="utf-8")
    print(f"Finished creating file at: `{output}`...")


def main(argv: Optional[List[str]] = None) -> int:
    """Command entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else argv
    output: Optional[str] = None
    version: Optional[str] = None

    for arg in args:
        if arg.startswith("--output="):
            output = arg[len("--output="):]
        elif arg.startswith("-o="):
            output = arg[len("-o="):]
        elif arg.startswith("--version="):
            version = arg[len("--version="):]
        elif arg.startswith("-v="):
            version = arg[len("-v="):]
        else:
            print(f"Unknown argument: {arg}", file=sys.stderr)
            return 1

    if output is None:
        print("Output file is required", file=sys.stderr)
        return 1

    contents = download_derived_core_properties(version or "UNIDATA")

    print("Extracting data from file...")
    start_code_points = extract_derived_core_properties(contents, "ID_Start")
    continue_code_points = extract_derived_core_properties(contents, "ID_Continue")
    print("Data extracted from file")

    version_str = extract_version(contents)
    if version_str is None:
        raise ValueError("Unicode version not found in the downloaded file")

    write_module(output, start_code_points, continue_code_points, version_str)
    return 0


if __name__ == "__main__":
    sys.exit(main())