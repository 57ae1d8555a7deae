import asyncio

from src.pokedex import server


def test_all_tools_are_registered():
    tools = {tool.name for tool in asyncio.run(server.mcp.list_tools())}

    assert tools == {
        "random_creature",
        "random_creature_from_region",
        "random_creature_by_affinity",
        "creature_by_id",
        "natural_language_query",
        "start_battle",
        "make_move",
        "use_item",
        "battle_status",
    }


def test_tools_delegate_to_the_service(monkeypatch):
    monkeypatch.setattr(server.service, "random_creature_from_region", lambda region: f"region={region}")

    assert server.random_creature_from_region("kanto") == "region=kanto"
