"""Players, weapons and two teams managed from a console menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

MAX_PLAYERS = 10
MIN_DAMAGE = 1
MIN_RANGE = 2

Reader = Callable[[], str]
Writer = Callable[[str], object]


class RosterError(Exception):
    """Raised when a roster operation cannot be carried out."""


class PlayerClass(Enum):
    """The role a player has; the value is its display name."""

    ASSAULT = "Assault"
    SUPPORT = "Support"
    SNIPER = "Sniper"
    MEDIC = "Medic"


@dataclass(frozen=True)
class Weapon:
    """A named weapon with damage and range."""

    name: str
    damage: int
    range: int

    def describe(self) -> str:
        """The weapon part of a player's description line."""
        return f", Weapon: {self.name}, Damage: {self.damage}, Range: {self.range}"


@dataclass(eq=False)
class Player:
    """A player; two players are the same only if they are the same object."""

    name: str
    health: int
    player_class: PlayerClass
    weapon: Weapon | None = None

    def describe(self) -> str:
        """One line describing the player and the weapon, if any."""
        text = f"Name: {self.name}, Health: {self.health}, Class: {self.player_class.value}"
        if self.weapon is not None:
            text += self.weapon.describe()
        return text


@dataclass
class Team:
    """A named team holding at most MAX_PLAYERS players."""

    name: str
    players: list[Player] = field(default_factory=list)

    def __contains__(self, player: object) -> bool:
        return any(member is player for member in self.players)

    def add_player(self, player: Player) -> None:
        """Add a player; a duplicate or a full team is an error."""
        if player in self:
            raise RosterError("Player is already in the team.")
        if len(self.players) >= MAX_PLAYERS:
            raise RosterError("Team is full. Cannot add more players.")
        self.players.append(player)

    def remove_player(self, player: Player) -> None:
        """Remove a player; one that is not in the team is an error."""
        for index, member in enumerate(self.players):
            if member is player:
                del self.players[index]
                return
        raise RosterError("Player is not in the team.")

    def describe(self) -> str:
        """The team header followed by one line per player."""
        lines = [f"Team: {self.name}, Number of Players: {len(self.players)}"]
        lines.extend(player.describe() for player in self.players)
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its length and height."""

    length: float = 0.0
    height: float = 0.0

    def area(self) -> float:
        return self.length * self.height

    def perimeter(self) -> float:
        return 2 * (self.length + self.height)


def create_weapon(name: str, damage: int, range: int) -> Weapon:
    """Build a weapon, requiring damage of at least 1 and range of at least 2."""
    if damage < MIN_DAMAGE or range < MIN_RANGE:
        raise RosterError("Invalid choice. Please enter valid values for damage and range.")
    return Weapon(name, damage, range)


def main_menu_text() -> str:
    """The text of the main menu."""
    return (
        "Main Menu\n"
        "1. Add Player\n"
        "2. Remove Player\n"
        "3. Display Team Info\n"
        "0. Exit\n"
    )


def _to_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


class RosterShell:
    """Console session managing the Dire and Radiant teams."""

    def __init__(self, read: Reader, write: Writer) -> None:
        self.read = read
        self.write = write
        self.players: list[Player] = []
        self.dire = Team("Dire")
        self.radiant = Team("Radiant")

    def _ask_int(self, prompt: str) -> int | None:
        self.write(prompt)
        return _to_int(self.read())

    def _ask_one_or_two(self, prompt: str) -> int:
        while True:
            answer = self._ask_int(prompt)
            if answer in (1, 2):
                return answer
            self.write("Invalid choice. Please enter a valid option (1 or 2).\n")

    def _choose_team(self) -> Team:
        answer = self._ask_one_or_two("Choose team for the player (1. Dire, 2. Radiant): ")
        return self.dire if answer == 1 else self.radiant

    def _ask_weapon(self) -> bool:
        prompt = "Do you want to give a weapon to the player? (1. Yes, 2. No): "
        return self._ask_one_or_two(prompt) == 1

    def _create_weapon(self) -> Weapon:
        while True:
            self.write("Enter weapon name: ")
            name = self.read()
            damage = self._ask_int("Enter weapon damage: ")
            weapon_range = self._ask_int("Enter weapon range: ")
            if damage is None or weapon_range is None:
                self.write("Invalid choice. Please enter valid values for damage and range.\n")
                continue
            try:
                return create_weapon(name, damage, weapon_range)
            except RosterError as error:
                self.write(f"{error}\n")

    def _choose_class(self) -> PlayerClass:
        classes = list(PlayerClass)
        while True:
            self.write("Choose player class:\n")
            for number, player_class in enumerate(classes, start=1):
                self.write(f"{number}. {player_class.value}\n")
            choice = self._ask_int("Enter your choice: ")
            if choice is not None and 1 <= choice <= len(classes):
                return classes[choice - 1]
            self.write("Invalid choice. Please enter a valid option.\n")

    def _ask_health(self) -> int:
        while True:
            health = self._ask_int("Enter player health: ")
            if health is not None:
                return health
            self.write("Invalid health. Please enter a number.\n")

    def add_player(self) -> Player:
        """Ask for the team, weapon, name, health and class of a new player."""
        team = self._choose_team()
        weapon = self._create_weapon() if self._ask_weapon() else None
        self.write("Enter player name: ")
        name = self.read()
        health = self._ask_health()
        player_class = self._choose_class()

        player = Player(name, health, player_class, weapon)
        try:
            team.add_player(player)
        except RosterError as error:
            self.write(f"{error}\n")
        else:
            self.write("Player added to the team.\n")
        self.players.append(player)
        return player

    def remove_player(self) -> Player | None:
        """List the players, ask for one and remove it from everywhere."""
        if not self.players:
            self.write("No players to remove.\n")
            return None

        self.write("Choose player to remove:\n")
        for number, player in enumerate(self.players, start=1):
            self.write(f"{number}. \nPlayer Information:\n{player.describe()}\n")

        choice = self._ask_int("Enter the number of the player to remove: ")
        if choice is None or not 1 <= choice <= len(self.players):
            self.write("Invalid choice. No player removed.\n")
            return None

        player = self.players.pop(choice - 1)
        for team in (self.dire, self.radiant):
            try:
                team.remove_player(player)
            except RosterError as error:
                self.write(f"Error: {error}\n")
            else:
                self.write("Player removed from the team.\n")
        self.write("Player removed.\n")
        return player

    def run(self) -> None:
        """Serve the main menu until the user exits or input ends."""
        try:
            while True:
                self.write(main_menu_text())
                choice = self._ask_int("Enter your choice: ")
                if choice == 1:
                    self.add_player()
                elif choice == 2:
                    self.remove_player()
                elif choice == 3:
                    self.write(self.dire.describe())
                    self.write(self.radiant.describe())
                elif choice == 0:
                    self.write("Exiting the program...\n")
                    return
                else:
                    self.write("Invalid choice. Please enter a valid option.\n")
        except EOFError:
            return


def _token_reader(stream: TextIO) -> Reader:
    tokens = (token for line in stream for token in line.split())

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError("no more input") from None

    return read


def _stdout_writer(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Show three rectangles, then manage the teams interactively."""
    argparse.ArgumentParser(description="Team roster manager.").parse_args(argv)

    rectangles = [Rectangle(), Rectangle(3.0, 4.0), Rectangle(5.0, 2.5)]
    for number, rectangle in enumerate(rectangles, start=1):
        print(
            f"Rectangle {number}: Area = {rectangle.area():g}, "
            f"Perimeter = {rectangle.perimeter():g}"
        )

    RosterShell(_token_reader(sys.stdin), _stdout_writer).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())