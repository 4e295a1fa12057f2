from __future__ import annotations

from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError
from ..core.logging import get_logger
from .access import current_user, start_session

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_user() is not None:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = bool(request.form.get("remember_me"))

            try:
                s_user = container.auth_service.authenticate(email, password)
                start_session(s_user, remember=remember)
                logger.info("User %s signed in as %s", s_user.user_id, s_user.role.value)
                return redirect(url_for("dashboard"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Login failed")
                flash("Unable to sign in right now. Please try again.", "danger")

        return render_template("login.html")

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        session.clear()
        flash("You have been signed out.", "info")
        return redirect(url_for("login"))
