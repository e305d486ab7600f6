"""A TCP server that keeps one shared point set and answers hull commands."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Iterator

from convexhull.geometry import Convex
from convexhull.interactive import parse_point
from convexhull.prompt import _leading_int

PORT = 9034
WELCOME = "Convex Server ready. Use commands: Newgraph, Newpoint, Removepoint, CH\n"


def format_float(value: float) -> str:
    """Format a number with six fixed decimals."""
    return f"{value:f}"


def _send(conn: socket.socket, text: str) -> None:
    try:
        conn.sendall(text.encode("utf-8"))
    except OSError:
        pass


class ConvexServer:
    """Listen on a TCP port and serve clients one at a time over a shared point set.

    A point whose coordinates are not numbers raises ValueError from the
    client handler.
    """

    def __init__(self, host: str = "", port: int = PORT) -> None:
        self.convex: Convex | None = None
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._sock.bind((host, port))
            self._sock.listen(5)
        except OSError:
            self._sock.close()
            raise
        self.address = self._sock.getsockname()

    def __enter__(self) -> ConvexServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def handle_client(self, conn: socket.socket) -> None:
        """Answer commands from one connected client until it disconnects, then close it."""
        with conn, conn.makefile(
            "r", encoding="utf-8", errors="replace", newline=""
        ) as reader:
            lines = iter(reader)
            _send(conn, WELCOME)
            for line in lines:
                response = self._respond(line, lines, conn)
                if response is not None:
                    _send(conn, response)

    def _respond(
        self, line: str, lines: Iterator[str], conn: socket.socket
    ) -> str | None:
        tokens = line.split()
        cmd = tokens[0] if tokens else ""
        arg = tokens[1] if len(tokens) > 1 else ""
        if cmd == "Newgraph":
            return self._new_graph(arg, lines, conn)
        if cmd == "Newpoint":
            return self._change_point(arg, "Newpoint", "added")
        if cmd == "Removepoint":
            return self._change_point(arg, "Removepoint", "removed")
        if cmd == "CH":
            return self._hull_area()
        return "Unknown command \n"

    def _new_graph(
        self, arg: str, lines: Iterator[str], conn: socket.socket
    ) -> str:
        count = _leading_int(arg)
        if count <= 0:
            return "Number of points must be positive \n"
        self.convex = Convex(count)
        _send(conn, f"Enter {count} points x,y \n")
        added = 0
        while added < count:
            raw = next(lines, None)
            if raw is None:
                break
            if "," not in raw:
                _send(conn, "Invalid input use format x,y\n")
                continue
            self.convex.add_point(*parse_point(raw))
            added += 1
        return "Graph created\n"

    def _change_point(self, arg: str, command: str, verb: str) -> str:
        if self.convex is None:
            return "No graph exists. Use Newgraph first\n"
        if "," not in arg:
            return f"Invalid input, use format {command} x,y\n"
        x, y = parse_point(arg)
        if verb == "added":
            self.convex.add_point(x, y)
        else:
            self.convex.remove_point(x, y)
        return f"Point ({format_float(x)},{format_float(y)}) {verb}\n"

    def _hull_area(self) -> str | None:
        if self.convex is None:
            return "No graph exists, use Newgraph to create one \n"
        self.convex.find_hull()
        if len(self.convex.hull()) < 3:
            # No reply is sent in this case.
            return None
        try:
            area = self.convex.area()
        except ValueError as exc:
            return f"Error calculating area: {exc}\n"
        return f"Convex hull area: {format_float(area)}\n"

    def serve_forever(self) -> None:
        """Accept clients one after another until the server is closed."""
        while True:
            try:
                conn, _ = self._sock.accept()
            except OSError as exc:
                if self._sock.fileno() == -1:
                    return
                print(f"accept failed: {exc}", file=sys.stderr)
                continue
            print("Client connected.", flush=True)
            self.handle_client(conn)
            print("Client disconnected.", flush=True)

    def close(self) -> None:
        """Stop listening."""
        self._sock.close()


def main(argv: list[str] | None = None) -> int:
    """Start the server and serve clients until interrupted."""
    parser = argparse.ArgumentParser(description="Serve convex hull commands over TCP.")
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    args = parser.parse_args(argv)
    try:
        server = ConvexServer(args.host, args.port)
    except OSError as exc:
        print(f"bind failed: {exc}", file=sys.stderr)
        return 1
    with server:
        print(f"Convex Hull Server started on port {args.port}", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())