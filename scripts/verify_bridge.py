import asyncio
import sys
import os
import uvicorn
from fastapi import FastAPI, Body

# Add the project root to sys.path
sys.path.append(os.getcwd())

from browser_tools_bridge.commands import CommandDispatcher
from browser_tools_bridge.exceptions import CommandError

# Mock BrowserTools agent
mock_app = FastAPI()

@mock_app.get("/console-logs")
async def console_logs():
    return [
        {"level": "log", "message": "App mounted"},
        {"level": "warn", "message": "Deprecated prop"},
    ]

@mock_app.get("/selected-element")
async def selected_element():
    return {
        "status": "success",
        "data": {"element": {"tagName": "BUTTON", "id": "submit", "innerText": "Send"}},
    }

@mock_app.post("/accessibility-audit")
async def accessibility_audit(payload: dict = Body(...)):
    print(f"Mock agent received: {payload}")
    return {
        "status": "success",
        "data": {"score": 0.87, "issues": [{"title": "Missing alt text", "description": "img has no alt"}]},
    }

@mock_app.post("/debug-mode")
async def debug_mode(payload: dict = Body(...)):
    return {"status": "error", "message": "Debugger not attached"}

async def start_mock_server():
    config = uvicorn.Config(mock_app, port=3025, log_level="error")
    server = uvicorn.Server(config)
    await server.serve()

async def run_dispatcher_test():
    # Wait for server to start
    await asyncio.sleep(2)

    print("\n--- Testing Command Dispatcher ---")
    dispatcher = CommandDispatcher()
    launch = dispatcher.resolve_command_spawn({"port": 3025})
    print(f"Launch command: {launch.command} {' '.join(launch.args)} {launch.env}")

    cases = [
        ("browser-capture", ["logs"]),
        ("browser-capture", ["element"]),
        ("browser-audit", ["accessibility"]),
        ("browser-debug", ["start"]),
        ("browser-capture", ["network"]),  # not served by the mock
        ("browser-audit", []),
    ]
    for i, (command, args) in enumerate(cases, start=1):
        print(f"\n{i}. /{command} {' '.join(args)}")
        try:
            output = await asyncio.to_thread(dispatcher.run_command, command, args)
            print(f"✅ [{output.sections[0].label}]\n{output.text}")
        except CommandError as e:
            print(f"❌ ERROR: {e}")

async def main():
    # Run server and client concurrently
    server_task = asyncio.create_task(start_mock_server())
    client_task = asyncio.create_task(run_dispatcher_test())

    # Wait for client tests to finish
    await client_task

    server_task.cancel()

if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
