#!/usr/bin/env python3
"""
Demo: Build the example RPN log, display it, and export it.

Shows the console dump plus the JSON and YAML snapshots.
"""

from rpnlog.examples import build_example_log
from rpnlog.backends import save_log_file
from rpnlog.serialization import log_to_json, log_to_yaml


def main():
    log = build_example_log()

    print("=" * 80)
    print("RPN LOG DEMO")
    print("=" * 80)

    print("\nCONSOLE:")
    print("-" * 80)
    log.display()

    print("\nJSON:")
    print("-" * 80)
    print(log_to_json(log))

    print("\nYAML:")
    print("-" * 80)
    print(log_to_yaml(log), end="")

    filename = "rpn_log.txt"
    save_log_file(log, filename)
    print(f"\nSaved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
