#!/usr/bin/env python3
"""
Example demonstrating logging in tcpstate.

DEBUG shows every dispatch decision on stderr, while the trace itself goes
to stdout (or, here, is recorded and dumped as JSON).
"""

import logging

from tcpstate import Connection, RecordingSink
from tcpstate.logging_config import setup_logging


def main():
    setup_logging(logging.DEBUG)

    recorder = RecordingSink()
    connection = Connection(sinks=[recorder])
    connection.run(["active-open", "active-open", "send", "close", "close"])

    for notice in recorder.notices:
        print(notice.model_dump_json())


if __name__ == "__main__":
    main()
