import logging

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

def client_error(code: str, op: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": "blah"}}, op)

class FakeSSM:
    """Mimics the boto3 SSM client: values are the upper-cased name.

    Names such as "aws error" or "/aws error" trigger the matching failure.
    """

    def __init__(self):
        self.get_parameters_calls = []

    def get_parameter(self, Name, WithDecryption=False):
        assert WithDecryption is True
        trigger = Name.lstrip("/")
        if trigger == "no param found":
            raise client_error("ParameterNotFound", "GetParameter")
        if trigger == "no param version found":
            raise client_error("ParameterVersionNotFound", "GetParameter")
        if trigger == "aws error":
            raise client_error("InvalidKeyId", "GetParameter")
        if trigger == "unknown error":
            raise EndpointConnectionError(endpoint_url="https://ssm.example")
        return {"Parameter": {"Name": Name, "Value": Name.upper()}}

    def get_parameters(self, Names, WithDecryption=False):
        assert WithDecryption is True
        assert 1 <= len(Names) <= 10
        self.get_parameters_calls.append(list(Names))
        out = {"Parameters": [], "InvalidParameters": []}
        for full in Names:
            trigger = full.lstrip("/")
            if trigger == "invalid":
                out["InvalidParameters"].append(full)
            elif trigger == "aws error":
                raise client_error("InvalidKeyId", "GetParameters")
            elif trigger == "unknown error":
                raise EndpointConnectionError(endpoint_url="https://ssm.example")
            else:
                name, sep, label = full.partition(":")
                selector = sep + label
                out["Parameters"].append(
                    {"Name": name, "Selector": selector, "Value": (name + "&" + selector).upper()}
                )
        return out

@pytest.fixture
def fake_ssm():
    return FakeSSM()

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("SSMPS_BASE_PATH", "AWS_REGION", "LOCALSTACK_ENDPOINT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("ssmps")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
