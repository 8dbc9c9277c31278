#!/usr/bin/env python3
from __future__ import annotations

import asyncio

from taskbridge.motion import MotionRESTConnector


async def main() -> None:
    async with MotionRESTConnector.from_env() as motion:
        workspaces = await motion.list_workspaces()
        for ws in workspaces.items:
            print("=" * 60)
            print(f"Workspace  : {ws.get('name')} ({ws.get('id')})")
            print(f"Labels     : {', '.join(ws.get('labels', [])) or '-'}")
            for status in ws.get("statuses", []):
                flags = []
                if status.is_default_status:
                    flags.append("default")
                if status.is_resolved_status:
                    flags.append("resolved")
                suffix = f" [{', '.join(flags)}]" if flags else ""
                print(f"  status   : {status.name}{suffix}")

            projects = await motion.list_projects(ws["id"])
            print(f"Projects   : {projects.total_items}")
            for project in projects.items[:10]:
                print(f"  - {project.get('name')}")


if __name__ == "__main__":
    asyncio.run(main())
