"""
Lookups against AWS Systems Manager Parameter Store.

`client` is a boto3 SSM client, or anything exposing `get_parameter` and
`get_parameters` with the same keyword arguments and response shape.
"""

import logging
from typing import Any, Dict, Sequence

from botocore.exceptions import ClientError

from ssmps.batching import GET_PARAMETERS_LIMIT, make_batches
from ssmps.errors import BackendError, UnknownError

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = ("ParameterNotFound", "ParameterVersionNotFound")

def _error_code(err: ClientError) -> str:
    return err.response.get("Error", {}).get("Code", "")

def _error_message(err: ClientError) -> str:
    return err.response.get("Error", {}).get("Message", "")

def get_param_value(client: Any, name: str) -> str:
    """Fetch one decrypted parameter.

Returns "" when the parameter (or the requested version) does not exist.
Raises BackendError for any other service error and UnknownError for
failures that carry no service error code.
"""
    try:
        resp = client.get_parameter(Name=name, WithDecryption=True)
    except ClientError as e:
        code = _error_code(e)
        if code in NOT_FOUND_CODES:
            logger.warning("ssmps(%r) returned no data: %s", name, code)
            return ""
        raise BackendError(f"ssmps({name!r}) returned error: {code}", code) from e
    except Exception as e:
        raise UnknownError(f"ssmps({name!r}) returned unknown error: {e}") from e
    return resp["Parameter"]["Value"]

def get_multiple_param_values(client: Any, paths: Sequence[str]) -> Dict[str, str]:
    """Fetch many decrypted parameters, GET_PARAMETERS_LIMIT names per call.

Every requested path is present in the result; paths the service reports
as invalid stay "". The first failing call aborts the whole lookup.
"""
    path_to_value: Dict[str, str] = {p: "" for p in paths}

    for batch in make_batches(paths, GET_PARAMETERS_LIMIT):
        if not batch:
            continue
        try:
            resp = client.get_parameters(Names=list(batch), WithDecryption=True)
        except ClientError as e:
            code = _error_code(e)
            raise BackendError(
                f"ssmps returned error: {code} message: {_error_message(e)}", code
            ) from e
        except Exception as e:
            raise UnknownError(f"ssmps returned unknown error: {e}") from e

        for name in resp.get("InvalidParameters", []):
            logger.warning("ssmps(%r) returned no data: Invalid Parameter", name)

        for p in resp.get("Parameters", []):
            key = p["Name"]
            # versioned/labelled lookups come back as name + ":selector"
            if p.get("Selector") is not None:
                key += p["Selector"]
            path_to_value[key] = p["Value"]

    return path_to_value
