import asyncio

import pytest

import config
from main import browse_user_list
from wordbrowser.session import NotLoggedInError, Session


def test_login_logout():
    session = Session()
    assert not session.is_logged_in

    session.login("u1")
    assert session.require_user() == "u1"

    session.logout()
    with pytest.raises(NotLoggedInError):
        session.require_user()


def test_empty_user_id_is_anonymous():
    assert not Session("").is_logged_in
    with pytest.raises(ValueError):
        Session().login("")


def test_user_lists_need_login(capsys):
    assert asyncio.run(browse_user_list(Session(), "favorites")) == 1
    assert config.MSG_LOGIN_REQUIRED.format(kind="favorites") in capsys.readouterr().out
