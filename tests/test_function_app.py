import json

import function_app

# get_functions() rejects a second call for the same app
FUNCTIONS = {fn.get_function_name(): fn for fn in function_app.app.get_functions()}


def test_chat_bot_function_is_registered():
    assert "chat_bot" in FUNCTIONS


def test_registered_function_delegates_to_handler(make_request):
    user_function = FUNCTIONS["chat_bot"].get_user_function()
    response = user_function(make_request({"message": "hello"}))
    assert response.status_code == 200
    assert json.loads(response.get_body()) == {"botResponse": "Echo: hello"}
