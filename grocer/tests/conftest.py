"""Pytest fixtures: a household on a temporary data dir and a scripted OpenAI stand-in."""
import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from grocer.api.api_ai import RecipeAssistant
from grocer.api.api_run import create_app
from grocer.domain.Household import Household
from grocer.infra.Storage import JsonKeyValueStore


class ScriptedResponses:
    """Replays queued outputs for ``client.responses.create``; exceptions in the queue are raised."""

    def __init__(self):
        self.outputs = []
        self.calls = []

    def queue(self, output):
        if not isinstance(output, (str, BaseException)):
            output = json.dumps(output)
        self.outputs.append(output)
        return self

    def create(self, **kwargs):
        self.calls.append(kwargs)
        output = self.outputs.pop(0)
        if isinstance(output, BaseException):
            raise output
        return SimpleNamespace(output_text=output)


@pytest.fixture
def store(tmp_path):
    return JsonKeyValueStore(tmp_path / "data")


@pytest.fixture
def household(store):
    return Household(store)


@pytest.fixture
def responses():
    return ScriptedResponses()


@pytest.fixture
def assistant(responses):
    return RecipeAssistant(client=SimpleNamespace(responses=responses), model="test-model")


@pytest.fixture
def client(household, assistant):
    return TestClient(create_app(household=household, assistant=assistant))
