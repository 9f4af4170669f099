"""Interactive text front end for registering, logging in and managing friends."""

from __future__ import annotations

import argparse
import random
import sys
from typing import TextIO

from campusnet.network import Profile, SelfFriendshipError, SocialGraph
from campusnet.recommend import RecommendationKind, recommend_friends

CLEAR = "\x1b[1;1H\x1b[2J"
GRAPH_SIZE = 1000
MIN_YEAR = 1
MAX_YEAR = 10

WELCOME = "Welcome! Nice to see you on this beautiful day (◕‿◕✿).\n\n"
HOME_OPTIONS = "OPTIONS :   register        login       quit\n\n"
AFTER_REGISTER_OPTIONS = "OPTIONS :   login       home\n\n"
MENU = (
    "MENU    :   recommendations     friends        profile     "
    "unregister      logout\n\n"
)
BEFRIEND_SUBMENU = "SUBMENU :   befriend       back\n\n"
FRIENDS_SUBMENU = "SUBMENU :   unfriend        check-status        back\n\n"
PROFILE_SUBMENU = "SUBMENU :   modify      back\n\n"
PARAMETERS = (
    "PARAMETERS :   name        year     branch       club       mess       "
    "sport       back\n\n"
)
PROMPT = "Type your command here : "
RETRY_PROMPT = "Please type your command again here : "
CAUTION = "Caution : do not use space or enter button while entering parameters.\n\n"

_TEXT_FIELDS = {
    "name": "name",
    "branch": "branch",
    "club": "club",
    "mess": "mess",
    "sport": "sport",
}


class _EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


class _Console:
    """Reads whitespace-separated words and single characters, writes text."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._pending = ""

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def read_char(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        char = self._stdin.read(1)
        if not char:
            raise _EndOfInput
        return char

    def read_word(self) -> str:
        char = self.read_char()
        while char.isspace():
            char = self.read_char()
        letters = [char]
        while True:
            try:
                char = self.read_char()
            except _EndOfInput:
                break
            if char.isspace():
                self._pending = char
                break
            letters.append(char)
        return "".join(letters)

    def read_int(self) -> int:
        while True:
            word = self.read_word()
            try:
                return int(word)
            except ValueError:
                self.write("Error : please enter a whole number : ")

    def wait_for_enter(self) -> None:
        self.read_char()
        self.read_char()

    def expect(self, word: str, choices: tuple[str, ...], error: str) -> str:
        while word not in choices:
            self.write(error)
            self.write(RETRY_PROMPT)
            word = self.read_word()
        return word


def _read_existing_id(
    console: _Console,
    graph: SocialGraph,
    user_id: int,
    what: str,
    retry: str,
    blank_on_exit: bool = True,
) -> int | None:
    """Re-ask until ``user_id`` names a user; ``None`` if the user enters 0."""
    while user_id <= 0 or user_id not in graph:
        console.write(f"Error : {what} ID does not exist.\n\n")
        console.write(retry)
        user_id = console.read_int()
        if user_id == 0:
            if blank_on_exit:
                console.write("\n\n")
            return None
    return user_id


def _show_profile(console: _Console, profile: Profile) -> None:
    console.write(f"name : {profile.name}\n")
    console.write(f"academic year : {profile.year}\n")
    console.write(f"branch : {profile.branch}\n")
    console.write(f"club : {profile.club}\n")
    console.write(f"mess : {profile.mess}\n")
    console.write(f"sport : {profile.sport}\n")


def _register(console: _Console, graph: SocialGraph) -> str:
    console.write(CLEAR)
    console.write(
        "Caution!    :   Do not use space or enter button while entering parameters\n\n"
    )
    console.write("Enter name : ")
    name = console.read_word()
    console.write("Enter academic year : ")
    year = console.read_int()
    while not MIN_YEAR <= year <= MAX_YEAR:
        console.write("Error : invalid academic year\n")
        console.write("Please enter your academic year again here : ")
        year = console.read_int()
    console.write("Enter branch : ")
    branch = console.read_word()
    console.write("Enter club : ")
    club = console.read_word()
    console.write("Enter mess : ")
    mess = console.read_word()
    console.write("Enter sport : ")
    sport = console.read_word()

    console.write("\n\n")
    console.write(
        "Congratulations, your account has been created successfully (~˘▾˘)~.\n\n"
    )
    user_id = graph.add_user(name, branch, year, mess, club, sport)
    console.write(f"You are successfully registered with the ID Number : {user_id}\n")
    console.write("\n\n")

    console.write(AFTER_REGISTER_OPTIONS)
    console.write(PROMPT)
    return console.expect(
        console.read_word(),
        ("login", "home"),
        "Error : incorrect OPTIONS command.\n\n",
    )


def _print_named(console: _Console, graph: SocialGraph, user_ids: list[int]) -> None:
    for user_id in user_ids:
        console.write(f"{graph.profile(user_id).name} {user_id}\n")


def _recommendations(
    console: _Console, graph: SocialGraph, user_id: int, rng: random.Random
) -> None:
    console.write("How many friend recommendation do you want? : ")
    limit = console.read_int()
    console.write("\n")
    while limit <= 0:
        console.write("Error: Invalid Input\n")
        console.write("Please enter how many friend recommendation do you want? : ")
        limit = console.read_int()

    result = recommend_friends(graph, user_id, limit, rng)
    if result.kind is RecommendationKind.SIMILAR_INTERESTS:
        console.write(
            f"You do not have enough friends to get {limit} recommendations\n"
        )
        console.write(
            "So we have recommended friends to you based on your similar interests\n"
        )
        if not result.user_ids:
            console.write("You are the only user in the System\n")
        else:
            console.write("The Recommendations are :\n")
            _print_named(console, graph, result.user_ids)
    else:
        _print_named(console, graph, result.user_ids)
        console.write("\n\n")

    console.write(BEFRIEND_SUBMENU)
    console.write(PROMPT)
    choice = console.read_word()
    while choice != "back":
        choice = console.expect(
            choice, ("befriend", "back"), "Error : incorrect SUBMENU command.\n"
        )
        if choice == "befriend":
            console.write("Enter person ID: ")
            person = _read_existing_id(
                console,
                graph,
                console.read_int(),
                "person",
                "Enter person ID again or enter 0 to exit : ",
            )
            if person is not None:
                try:
                    graph.add_friend(user_id, person)
                except SelfFriendshipError:
                    console.write("You cannot befriend yourself\n\n")
                else:
                    console.write(
                        "Person has been added to your friends list (^̮^).\n\n"
                    )
        if choice != "back":
            console.write(BEFRIEND_SUBMENU)
            console.write(PROMPT)
            choice = console.read_word()


def _friends(console: _Console, graph: SocialGraph, user_id: int) -> None:
    friends = graph.friends(user_id)
    if not friends:
        console.write("Your friend list is empty\n")
    else:
        console.write("Your friends are:\n")
        _print_named(console, graph, friends)

    console.write(FRIENDS_SUBMENU)
    console.write(PROMPT)
    choice = console.read_word()
    while choice != "back":
        choice = console.expect(
            choice,
            ("unfriend", "check-status", "back"),
            "Error : incorrect SUBMENU command.\n",
        )
        if choice == "unfriend":
            console.write("Enter friend id: ")
            friend = _read_existing_id(
                console,
                graph,
                console.read_int(),
                "friend",
                "Enter friend ID again or enter 0 to exit : ",
            )
            if friend is not None:
                graph.remove_friend(user_id, friend)
                console.write(
                    "Person has been removed from your friends list ¯/_(ツ)_/¯.\n\n"
                )
        elif choice == "check-status":
            console.write("Enter person id to check friendship status : ")
            person = _read_existing_id(
                console,
                graph,
                console.read_int(),
                "person",
                "Enter person ID again or enter 0 to exit : ",
            )
            if person is not None:
                if graph.is_friend(user_id, person):
                    console.write("Person is in your friends list (ᵔᴥᵔ).\n\n")
                else:
                    console.write("Person is not in your friends list ⚆ _ ⚆.\n\n")
        if choice != "back":
            console.write(FRIENDS_SUBMENU)
            console.write(PROMPT)
            choice = console.read_word()


def _modify(console: _Console, profile: Profile) -> None:
    console.write(PARAMETERS)
    console.write("Type your command here : ")
    change = console.read_word()
    while change != "back":
        change = console.expect(
            change,
            ("name", "year", "branch", "club", "mess", "sport", "back"),
            "Error : incorrect PARAMETER command.\n",
        )
        console.write(CAUTION)
        if change == "year":
            console.write("Enter new academic year : ")
            profile.year = console.read_int()
            console.write("academic year changed successfully\n\n")
        elif change in _TEXT_FIELDS:
            console.write(f"Enter new {change} : ")
            setattr(profile, _TEXT_FIELDS[change], console.read_word())
            console.write(f"{change} changed successfully\n\n")
        if change != "back":
            console.write(PARAMETERS)
            console.write(PROMPT)
            change = console.read_word()


def _profile(console: _Console, graph: SocialGraph, user_id: int) -> None:
    profile = graph.profile(user_id)
    _show_profile(console, profile)
    console.write(PROFILE_SUBMENU)
    console.write(PROMPT)
    choice = console.read_word()
    while choice != "back":
        choice = console.expect(
            choice, ("modify", "back"), "Error : incorrect SUBMENU command.\n"
        )
        if choice == "modify":
            _modify(console, profile)
        if choice != "back":
            _show_profile(console, profile)
            console.write(PROFILE_SUBMENU)
            console.write(PROMPT)
            choice = console.read_word()


def _session(
    console: _Console, graph: SocialGraph, user_id: int, rng: random.Random
) -> None:
    console.write(CLEAR)
    console.write("Hi, there ! (｡◕‿‿◕｡), how is it going ?\n\n")
    console.write(MENU)
    console.write(PROMPT)
    command = console.read_word()
    while command != "logout":
        command = console.expect(
            command,
            ("recommendations", "friends", "profile", "unregister", "logout"),
            "Error : incorrect MENU command.\n",
        )
        if command == "logout":
            return
        if command == "recommendations":
            _recommendations(console, graph, user_id, rng)
        elif command == "friends":
            _friends(console, graph, user_id)
        elif command == "profile":
            _profile(console, graph, user_id)
        elif command == "unregister":
            graph.remove_user(user_id)
            console.write(CLEAR)
            console.write("Account deleted successfully.\n\n")
            console.write("We will miss you (>人<).\n\n")
            console.write("Press ENTER key to exit : ")
            console.wait_for_enter()
            return
        console.write(MENU)
        console.write(PROMPT)
        command = console.read_word()


def _login(console: _Console, graph: SocialGraph, rng: random.Random) -> None:
    console.write(CLEAR)
    console.write("Enter login ID : ")
    user_id = _read_existing_id(
        console,
        graph,
        console.read_int(),
        "login",
        "Enter login ID again or press 0 to go back: ",
        blank_on_exit=False,
    )
    if user_id is not None:
        _session(console, graph, user_id, rng)


def run(
    stdin: TextIO, stdout: TextIO, rng: random.Random | None = None
) -> SocialGraph:
    """Drive the interactive session until ``quit`` or end of input.

    Returns the graph as it stands when the session ends.
    """
    rng = rng or random.Random()
    console = _Console(stdin, stdout)
    graph = SocialGraph(GRAPH_SIZE)
    try:
        console.write(CLEAR)
        console.write(WELCOME)
        console.write(HOME_OPTIONS)
        console.write(PROMPT)
        command = console.read_word()
        while command != "quit":
            command = console.expect(
                command,
                ("register", "login", "quit"),
                "Error : incorrect OPTIONS command.\n\n",
            )
            if command == "quit":
                break
            if command == "register":
                command = _register(console, graph)
            if command == "login":
                _login(console, graph, rng)
            console.write(CLEAR)
            console.write(WELCOME)
            console.write(HOME_OPTIONS)
            console.write(PROMPT)
            command = console.read_word()
        console.write(CLEAR)
    except _EndOfInput:
        console.write("\n")
    return graph


def main(argv: list[str] | None = None) -> int:
    """Run the interactive front end on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="campusnet", description="Campus social network in the terminal."
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="seed for shuffling recommendations"
    )
    args = parser.parse_args(argv)
    run(sys.stdin, sys.stdout, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())