"""Interactive menu over a friend network loaded from a CSV file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from .network import FriendNet
from .profiles import (
    AGE_WIDTH,
    NAME_WIDTH,
    OCCUPATION_WIDTH,
    ProfileStore,
)

PROFILE_FILE = "ProfileData.txt"

MENU = (
    "Welcome to FriendNet! Please choose an option.",
    "1) Add a new user",
    "2) Create a friendship",
    "3) Get a user's profile",
    "4) Get a user's friends' profiles",
    "5) Get a range of user profiles",
    "6) Print the entire network of friends",
    "7) Print the entire red black tree",
    "8) Exit FriendNet",
)


def parse_line(line: str) -> tuple[str, str, str, list[str]]:
    """Split ``name,age,occupation,"friend,friend"`` into its parts."""
    line = line.rstrip("\r\n")
    name, _, rest = line.partition(",")
    age, _, rest = rest.partition(",")
    occupation, _, rest = rest.partition(",")
    quoted = rest.partition('"')[2].partition('"')[0]
    friends = [friend for friend in quoted.split(",") if friend]
    return name, age, occupation, friends


def load_csv(path: str | Path, network: FriendNet) -> int:
    """Add every user in the file, with friendships to users already added."""
    count = 0
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            name, age, occupation, friends = parse_line(line)
            network.add_user(name, age, occupation)
            for friend in friends:
                network.add_friend(name, friend)
            count += 1
    return count


class _EndOfInput(Exception):
    pass


def run(network: FriendNet, stdin: TextIO, stdout: TextIO) -> None:
    """Serve the menu until the user exits or input runs out."""

    def say(text: str = "") -> None:
        print(text, file=stdout)

    def ask(prompt: str) -> str:
        say(prompt)
        line = stdin.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")

    def show(lines: list[str]) -> None:
        for line in lines:
            say(line)

    try:
        while True:
            for text in MENU:
                say(text)
            line = stdin.readline()
            if not line:
                return
            try:
                choice = int(line.strip())
            except ValueError:
                choice = 0
            if choice == 1:
                name = ask("Enter the user's name: ")[:NAME_WIDTH]
                tokens = ask("Enter the user's age: ").split()
                age = tokens[0][:AGE_WIDTH] if tokens else ""
                occupation = ask("Enter the user's occupation: ")[:OCCUPATION_WIDTH]
                network.add_user(name, age, occupation)
            elif choice == 2:
                first = ask("Enter the first user's name:")
                second = ask("Enter the second user's name:")
                network.add_friend(first, second)
            elif choice == 3:
                info = network.user_info(ask("Enter user's name for search:"))
                if info is not None:
                    say(info)
            elif choice == 4:
                show(network.friends_info(ask("Enter user's name for search:")))
            elif choice == 5:
                low = ask("Enter start name for range search:")
                high = ask("Enter stop name for range search:")
                show(network.range_info(low, high))
            elif choice == 6:
                show(network.network_lines())
            elif choice == 7:
                show(network.tree_lines())
            elif choice == 8:
                say("Thank you for using FriendNet. Goodbye.")
                return
            else:
                say("Invalid option. Please enter a number between 1 and 8.")
    except _EndOfInput:
        return


def main(argv: list[str] | None = None) -> int:
    """Load the CSV named on the command line and start the menu."""
    parser = argparse.ArgumentParser(prog="friendnet")
    parser.add_argument("csv", help="users file: name,age,occupation,\"friends\"")
    args = parser.parse_args(argv)
    store = ProfileStore(PROFILE_FILE)
    store.reset()
    network = FriendNet(store)
    try:
        load_csv(args.csv, network)
    except FileNotFoundError:
        pass
    run(network, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())