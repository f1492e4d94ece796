"""
Response Factory for Test Data

Raw Prometheus HTTP API response bodies, as the server sends them.
"""


class ResponseFactory:
    """Factory for Prometheus response payloads."""

    @staticmethod
    def error() -> bytes:
        return b"""
        {
            "status": "error",
            "error": "Major",
            "errorType": "Seriously Bad"
        }
        """

    @staticmethod
    def error_with_vector_and_warnings() -> bytes:
        return b"""
        {
            "status": "error",
            "error": "This is a strange error",
            "errorType": "Weird",
            "warnings": ["You timed out, foo"],
            "data": {
                "resultType": "vector",
                "result": [
                    {
                        "metric": {"__name__": "up", "job": "prometheus", "instance": "localhost:9090"},
                        "value": [1435781451.781, "1"]
                    },
                    {
                        "metric": {"__name__": "up", "job": "node", "instance": "localhost:9100"},
                        "value": [1435781451.781, "0"]
                    }
                ]
            }
        }
        """

    @staticmethod
    def scalar(value: str = "1", warnings: str = "") -> bytes:
        extra = f', "warnings": {warnings}' if warnings else ""
        return (
            '{"status": "success", "data": {"resultType": "scalar", '
            f'"result": [1435781451.781, "{value}"]}}{extra}}}'
        ).encode()

    @staticmethod
    def string() -> bytes:
        return b"""
        {
            "status": "success",
            "data": {"resultType": "string", "result": [1435781451.781, "foo"]}
        }
        """

    @staticmethod
    def vector() -> bytes:
        return b"""
        {
            "status": "success",
            "data": {
                "resultType": "vector",
                "result": [
                    {
                        "metric": {"__name__": "up", "job": "prometheus", "instance": "localhost:9090"},
                        "value": [1435781451.781, "1"]
                    },
                    {
                        "metric": {"__name__": "up", "job": "node", "instance": "localhost:9100"},
                        "value": [1435781451.781, "0"]
                    }
                ]
            }
        }
        """

    @staticmethod
    def matrix() -> bytes:
        return b"""
        {
            "status": "success",
            "data": {
                "resultType": "matrix",
                "result": [
                    {
                        "metric": {"__name__": "up", "job": "prometheus", "instance": "localhost:9090"},
                        "values": [[1435781430.781, "1"], [1435781445.781, "1"], [1435781460.781, "1"]]
                    },
                    {
                        "metric": {"__name__": "up", "job": "node", "instance": "localhost:9091"},
                        "values": [[1435781430.781, "0"], [1435781445.781, "0"], [1435781460.781, "1"]]
                    }
                ]
            }
        }
        """

    @staticmethod
    def series() -> bytes:
        return b"""
        {
            "status": "success",
            "data": [
                {"__name__": "up", "job": "prometheus", "instance": "localhost:9090"},
                {"__name__": "up", "job": "node", "instance": "localhost:9091"},
                {"__name__": "process_start_time_seconds", "job": "prometheus", "instance": "localhost:9090"}
            ]
        }
        """

    @staticmethod
    def label_values() -> bytes:
        return b'{"status": "success", "data": ["node", "prometheus"]}'

    @staticmethod
    def targets(extra_key: str = "") -> bytes:
        extra = f', "{extra_key}": []' if extra_key else ""
        return ("""
        {
            "status": "success",
            "data": {
                "activeTargets": [
                    {
                        "discoveredLabels": {
                            "__address__": "127.0.0.1:9090",
                            "__metrics_path__": "/metrics",
                            "__scheme__": "http",
                            "job": "prometheus"
                        },
                        "labels": {"instance": "127.0.0.1:9090", "job": "prometheus"},
                        "scrapeUrl": "http://127.0.0.1:9090/metrics",
                        "lastError": "",
                        "lastScrape": "2017-01-17T15:07:44.723715405+01:00",
                        "health": "up"
                    }
                ],
                "droppedTargets": [
                    {
                        "discoveredLabels": {
                            "__address__": "127.0.0.1:9100",
                            "__metrics_path__": "/metrics",
                            "__scheme__": "http",
                            "job": "node"
                        }
                    }
                ]""" + extra + """
            }
        }
        """).encode()

    @staticmethod
    def alertmanagers() -> bytes:
        return b"""
        {
            "status": "success",
            "data": {
                "activeAlertmanagers": [{"url": "http://127.0.0.1:9090/api/v1/alerts"}],
                "droppedAlertmanagers": [{"url": "http://127.0.0.1:9093/api/v1/alerts"}]
            }
        }
        """

    @staticmethod
    def flags() -> bytes:
        return b"""
        {
            "status": "success",
            "data": {
                "alertmanager.notification-queue-capacity": "10000",
                "alertmanager.timeout": "10s",
                "log.level": "info",
                "query.lookback-delta": "5m",
                "query.max-concurrency": "20"
            }
        }
        """
