import json
from types import SimpleNamespace

import agent
from inventory import InsufficientStock
from models import Ingredient


def _call(name, arguments, call_id="call-1"):
    return SimpleNamespace(type="function_call", name=name, arguments=arguments, call_id=call_id)


def test_tool_definitions_match_registry():
    assert [t.name for t in agent.tools] == ["getInventory", "hasIngredient", "cookPizzas"]


def test_handle_tool_calls_runs_cook_tool(fresh_inventory):
    response = SimpleNamespace(output=[
        _call("cookPizzas", json.dumps({"pizza_names": ["Veggie"]})),
        SimpleNamespace(type="message"),
    ])

    inputs = agent.handle_tool_calls(response)

    assert len(inputs) == 1
    assert inputs[0]["call_id"] == "call-1"
    result = json.loads(inputs[0]["output"])["result"]
    assert result.startswith("Successfully cooked 1 pizza(s)")
    assert fresh_inventory.quantity_of(Ingredient.MUSHROOMS) == 10


def test_handle_tool_calls_with_no_calls_returns_empty():
    assert agent.handle_tool_calls(SimpleNamespace(output=[SimpleNamespace(type="message")])) == []


def test_call_function_has_ingredient():
    assert agent.call_function("hasIngredient", '{"ingredient_name": "basil", "quantity": 15}') is True
    assert agent.call_function("hasIngredient", '{"ingredient_name": "truffle", "quantity": 1}') is False


def test_call_function_unknown_tool():
    assert agent.call_function("bakeCake", "{}") == {"error": "Unknown tool: bakeCake"}


def test_call_function_bad_arguments():
    assert "error" in agent.call_function("hasIngredient", '{"name": "DOUGH"}')
    assert "error" in agent.call_function("hasIngredient", '{"ingredient_name": "DOUGH", "quantity": -1}')
    assert "error" in agent.call_function("cookPizzas", "not json")


def test_call_function_reports_inventory_failure(monkeypatch):
    def broken_cook(pizza_names):
        raise InsufficientStock(Ingredient.DOUGH, 1, 0)

    monkeypatch.setitem(agent.FUNCTIONS, "cookPizzas", broken_cook)
    result = agent.call_function("cookPizzas", '{"pizza_names": ["Margherita"]}')
    assert "DOUGH" in result["error"]
