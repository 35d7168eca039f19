#!/usr/bin/env python3
"""Live countdown test for the session watchdog /ws server.

Connects, stays idle until the warning arrives, optionally clears it once with
an activity event, then waits for the server to expire the session and close
with 4003.
"""

from __future__ import annotations

import os
import json
import time
import uuid
import asyncio
import logging
import argparse

import websockets

EXPIRED_CLOSE_CODE = 4003


def _default_server() -> str:
    return (os.getenv("WATCHDOG_SERVER") or "localhost:8000").strip()


def _build_ws_url(server: str, *, secure: bool, session_id: str) -> str:
    s = server.strip().rstrip("/")
    if not (s.startswith("ws://") or s.startswith("wss://")):
        s = f"{'wss' if secure else 'ws'}://{s}"
    return f"{s}/ws?session_id={session_id}"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Watch a session warn, count down and expire")
    p.add_argument("--server", default=_default_server(), help="host:port or ws://host:port")
    p.add_argument("--secure", action="store_true")
    p.add_argument("--resume-once", action="store_true", help="send one activity event after the first warning")
    p.add_argument("--grace-seconds", type=float, default=5.0)
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


async def run(args: argparse.Namespace) -> int:
    session_id = f"e2e-{uuid.uuid4().hex[:12]}"
    ws_url = _build_ws_url(args.server, secure=args.secure, session_id=session_id)
    print(f"\n== SESSION COUNTDOWN ==\n  ws: {ws_url}\n")

    t0 = time.perf_counter()
    resumed = not args.resume_once
    try:
        async with websockets.connect(ws_url, ping_interval=None, ping_timeout=None) as ws:
            started = json.loads(await ws.recv())
            budget = float(started["payload"]["total_budget_s"])
            print(f"  budget: {budget:.0f}s, warning lead: {started['payload']['warn_lead_s']:.0f}s")
            deadline = t0 + budget * (1 if resumed else 2) + args.grace_seconds

            while True:
                remaining = deadline - time.perf_counter()
                if remaining <= 0:
                    print(f"  FAIL: no expiry within {deadline - t0:.0f}s")
                    return 2
                try:
                    msg = json.loads(await asyncio.wait_for(ws.recv(), timeout=remaining))
                except TimeoutError:
                    print(f"  FAIL: no expiry within {deadline - t0:.0f}s")
                    return 2

                msg_type = msg["type"]
                payload = msg["payload"]
                if msg_type == "session.warning":
                    print(f"  warning: {payload['seconds_remaining']}s left ({payload['urgency']})")
                    if not resumed:
                        resumed = True
                        await ws.send(
                            json.dumps({"type": "activity", "session_id": session_id, "payload": {"event": "keydown"}})
                        )
                elif msg_type == "session.tick" and args.debug:
                    print(f"  tick: {payload['seconds_remaining']}s ({payload['urgency']})")
                elif msg_type == "session.resumed":
                    print("  resumed after activity")
                elif msg_type == "session.expired":
                    print(f"  expired after {time.perf_counter() - t0:.1f}s")
    except websockets.exceptions.ConnectionClosed as exc:
        code = exc.rcvd.code if exc.rcvd is not None else None
        print(f"  close code: {code}")
        if code != EXPIRED_CLOSE_CODE:
            print(f"  FAIL: expected {EXPIRED_CLOSE_CODE}, got {code}")
            return 2
        print("  PASS")
        return 0


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(levelname)s: %(message)s")
    raise SystemExit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
