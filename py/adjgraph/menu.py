"""Interactive numbered menu driving a Graph."""
import logging
import sys
from typing import Callable, Dict, Optional, TextIO

from .graph import Graph
from .paths import path_distance
from .traversal import format_walk

logger = logging.getLogger(__name__)

MENU = """Graph Project Menu
1) Add vertex
2) Add edge
3) Remove vertex
4) Remove edge
5) Print graph
6) BFS traversal
7) DFS traversal
8) Shortest path (unweighted)
9) Check directed cycle
0) Exit"""


class EndOfInput(Exception):
    """Raised when the input stream is exhausted mid-session."""


class Menu:
    """Reads choices from ``stdin`` and applies them to one graph."""

    def __init__(self, graph: Graph, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.graph = graph
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.actions: Dict[str, Callable[[], None]] = {
            '1': self.add_vertex,
            '2': self.add_edge,
            '3': self.remove_vertex,
            '4': self.remove_edge,
            '5': self.print_graph,
            '6': self.bfs,
            '7': self.dfs,
            '8': self.shortest_path,
            '9': self.check_cycle,
        }

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str:
        """Prompt and read one trimmed line."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EndOfInput()
        return line.strip()

    def run(self) -> None:
        """Loop until the user picks 0 or input runs out."""
        while True:
            self.say(MENU)
            try:
                choice = self.ask("Choose: ")
            except EndOfInput:
                self.say()
                break

            if choice == '0':
                self.say("Goodbye!")
                break

            action = self.actions.get(choice)
            if action is None:
                self.say("Invalid choice.")
                continue

            logger.debug("menu action", extra={"choice": choice})
            try:
                action()
            except EndOfInput:
                self.say()
                break

    def add_vertex(self) -> None:
        name = self.ask("Vertex name: ")
        self.say("Added." if self.graph.add_vertex(name) else "Not added (maybe exists?).")

    def add_edge(self) -> None:
        src = self.ask("From: ")
        dst = self.ask("To: ")
        self.say("Edge added." if self.graph.add_edge(src, dst) else "Edge not added.")

    def remove_vertex(self) -> None:
        name = self.ask("Vertex to remove: ")
        self.say("Removed." if self.graph.remove_vertex(name) else "Not removed.")

    def remove_edge(self) -> None:
        src = self.ask("From: ")
        dst = self.ask("To: ")
        self.say("Removed." if self.graph.remove_edge(src, dst) else "Not removed.")

    def print_graph(self) -> None:
        self.say()
        self.say(self.graph.describe())
        self.say()

    def bfs(self) -> None:
        order = self.graph.bfs(self.ask("Start vertex: "))
        self.say(f"BFS: {format_walk(order)}" if order else "Vertex not found.")

    def dfs(self) -> None:
        order = self.graph.dfs(self.ask("Start vertex: "))
        self.say(f"DFS: {format_walk(order)}" if order else "Vertex not found.")

    def shortest_path(self) -> None:
        start = self.ask("Start: ")
        end = self.ask("End: ")
        path = self.graph.shortest_path(start, end)
        if not path:
            self.say("No path found (or vertices missing).")
            return
        self.say(f"Shortest path: [{', '.join(path)}]")
        self.say(f"Distance (edges): {path_distance(path)}")

    def check_cycle(self) -> None:
        if not self.graph.is_directed():
            self.say("Cycle check is enabled only for directed graphs in this project.")
        elif self.graph.has_directed_cycle():
            self.say("Graph HAS a directed cycle.")
        else:
            self.say("Graph has NO directed cycle.")


def run_menu(graph: Graph, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run the interactive menu against ``graph``."""
    Menu(graph, stdin, stdout).run()
