"""Hello World — the simplest perch app.

Demonstrates routes, path parameters, registration-order precedence,
return-value content negotiation, and Response chaining.

Run:
    python app.py
"""

from perch import App, Request, Response

app = App()


@app.route("/")
def index():
    return "Hello, World!"


@app.route("/greet/:name")
def greet(name: str):
    return f"Hello, {name}!"


# Registered before /users/:id, so it wins for /users/me
@app.route("/users/me")
def me():
    return {"id": "me", "self": True}


@app.route("/users/:id")
def user(request: Request, id: int):
    return {"id": id, "params": request.path_params}


@app.route("/api/status")
def status():
    return {"status": "ok", "version": "0.1.0"}


@app.route("/custom")
def custom():
    return Response("Created").with_status(201).with_header("X-Custom", "perch")


if __name__ == "__main__":
    app.run()
