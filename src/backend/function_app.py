import azure.functions as func
import logging
from chat_bot import main as chat_bot_handler

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

# served at /api/chat-bot
@app.function_name(name="chat_bot")
@app.route(route="chat-bot", methods=["POST", "OPTIONS"])
def chat_bot(req: func.HttpRequest) -> func.HttpResponse:
    logging.info('Python HTTP trigger function processed a request.')
    return chat_bot_handler(req)
