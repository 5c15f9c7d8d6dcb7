from __future__ import annotations

import io

import pytest
from starlette.datastructures import UploadFile

from formkit.models.rules import FormControl


@pytest.fixture
def upload():
    return UploadFile(file=io.BytesIO(b"hello"), filename="hello.txt")


@pytest.fixture
def email():
    return FormControl("contact-email", label="E-mail:", value="ann@example.com")


@pytest.fixture
def password():
    return FormControl("password", label="Password", value="secret")
