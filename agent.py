from azure.identity import DefaultAzureCredential
from azure.ai.projects import AIProjectClient
from azure.ai.projects.models import PromptAgentDefinition, FunctionTool
from openai.types.responses.response_input_param import FunctionCallOutput
from tools import FUNCTIONS
from inventory import InsufficientStock
from dotenv import load_dotenv
import os, json, logging

load_dotenv()

logger = logging.getLogger(__name__)

INSTRUCTIONS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "instructions.txt")


def call_function(name, arguments):
    """Run one registered tool; bad names or arguments come back as an error payload."""
    func = FUNCTIONS.get(name)
    if func is None:
        return {"error": f"Unknown tool: {name}"}
    try:
        return func(**json.loads(arguments or "{}"))
    except InsufficientStock as exc:
        # Stock consumed despite a passing check; report it to the model instead of ending the chat
        logger.error("Tool %s failed on inventory: %s", name, exc)
        return {"error": str(exc)}
    except (TypeError, ValueError, AttributeError) as exc:
        return {"error": str(exc)}


def handle_tool_calls(response):
    """Handle function calls from the agent."""
    inputs = []
    for item in response.output:
        if item.type == "function_call":
            result = call_function(item.name, item.arguments)
            inputs.append(FunctionCallOutput(type="function_call_output", call_id=item.call_id,
            output=json.dumps({"result": result})))
    return inputs


# Define tools
tools = [
    FunctionTool(
        name="getInventory",
        description="Get the current inventory of ingredients with their quantities",
        parameters={"type": "object", "properties": {}, "required": [], "additionalProperties": False},
        strict=True,
    ),
    FunctionTool(
        name="hasIngredient",
        description="Check if a specific ingredient is available in the required quantity",
        parameters={"type": "object", "properties": {
            "ingredient_name": {"type": "string", "description": "Ingredient name, e.g. DOUGH or mozzarella"},
            "quantity": {"type": "integer", "description": "Quantity needed"}
        }, "required": ["ingredient_name", "quantity"], "additionalProperties": False},
        strict=True,
    ),
    FunctionTool(
        name="cookPizzas",
        description="Cook the specified pizzas. Returns a result with cooked and failed pizzas.",
        parameters={"type": "object", "properties": {
            "pizza_names": {"type": "array", "items": {"type": "string"},
                            "description": "Pizza names to cook, in order"}
        }, "required": ["pizza_names"], "additionalProperties": False},
        strict=True,
    ),
]


def main():
    # Initialize clients
    project_client = AIProjectClient(endpoint=os.environ["AZURE_AI_FOUNDRY_PROJECT_ENDPOINT"], credential=DefaultAzureCredential())
    openai_client = project_client.get_openai_client()

    # Create agent
    with open(INSTRUCTIONS_FILE) as f:
        instructions = f.read()
    agent = project_client.agents.create_version(
        agent_name=os.environ["AZURE_AI_FOUNDRY_AGENT_NAME"],
        definition=PromptAgentDefinition(
            model=os.environ["AZURE_AI_FOUNDRY_MODEL_DEPLOYMENT_NAME"],
            instructions=instructions,
            tools=tools,
        ),
    )
    print(f"Agent ready: {agent.name} v{agent.version}")

    # Chat loop
    conversation = openai_client.conversations.create()
    print(f"Conversation created: {conversation.id}")

    while True:
        user_input = input("\nYou: ")
        if user_input.lower() in ("exit", "quit"):
            break

        response = openai_client.responses.create(
            conversation=conversation.id,
            input=user_input,
            extra_body={"agent": {"name": agent.name, "type": "agent_reference"}},
        )

        # Process tool calls until we get final text
        while (inputs := handle_tool_calls(response)):
            print(f"  → Processing {len(inputs)} tool call(s)...")
            response = openai_client.responses.create(
                input=inputs,
                previous_response_id=response.id,
                extra_body={"agent": {"name": agent.name, "type": "agent_reference"}},
            )

        print(f"Agent: {response.output_text}")


if __name__ == "__main__":
    main()
