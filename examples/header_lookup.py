from __future__ import annotations

import logging

from tsv_table import parse

SAMPLE = "id\tcity\tcountry\r\n1\tOslo\tNorway\r\n\r\n2\tLima\tPeru\r\n"


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    table = parse(SAMPLE, logging.getLogger("header-lookup"))
    city = table.find_column(0, "city")
    for row in range(1, table.row_count):
        print(table.get_cell(0, row), table.get_cell(city, row))
    print(table.dump(), end="")


if __name__ == "__main__":
    main()
