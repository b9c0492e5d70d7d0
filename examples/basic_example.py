#!/usr/bin/env python3
"""
Basic example: drive a connection through its states by hand.
"""

from tcpstate import Connection


def main():
    connection = Connection()

    connection.passive_open()   # CLOSED -> LISTEN
    connection.close()          # not valid while listening
    connection.send()           # incoming SYN: LISTEN -> ESTABLISHED
    connection.send()           # data transfer, stays ESTABLISHED
    connection.close()          # ESTABLISHED -> LISTEN

    print(f"\nFinal state: {connection.current_state_name()}")
    print(f"Valid operations now: {[op.display_name for op in connection.valid_operations()]}")


if __name__ == "__main__":
    main()
