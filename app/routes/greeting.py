from flask import Blueprint, current_app, redirect, render_template, request, url_for

from app.services.greeting import build_greeting_context

bp = Blueprint("greeting", __name__)


@bp.get("/")
def root():
    return redirect(url_for("greeting.hola"))


@bp.get("/hola")
def hola():
    """Greeting page for ``nombre``, or for "Mundo" when it is not given."""
    settings = current_app.extensions["greeting"]
    context = build_greeting_context(request.args.get("nombre"), settings)
    return render_template("hola.html", **context.to_dict())
