import io
import json
import sys

import pytest

from app.core.logging import get_logger, setup_logging


class TestJsonLogs:

    def test_records_are_serialized_as_json(self):
        buffer = io.StringIO()
        with pytest.MonkeyPatch.context() as mp:
            mp.setattr(sys, "stdout", buffer)
            setup_logging(json_logs=True, log_file=False)

        try:
            get_logger(module="test_logging").info("Lote revisado", flock_id=3)
        finally:
            setup_logging(log_file=False)

        entry = json.loads(buffer.getvalue().splitlines()[-1])

        assert entry["record"]["message"] == "Lote revisado"
        assert entry["record"]["extra"] == {"module": "test_logging", "flock_id": 3}
        assert entry["record"]["level"]["name"] == "INFO"
