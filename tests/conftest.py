"""Shared pytest fixtures for all tests."""
import pytest
from fastapi.testclient import TestClient

from mesos_exporter.core.config import Settings
from mesos_exporter.main import create_app
from mesos_exporter.metrics.registry import MasterMetrics
from mesos_exporter.services.collector import MasterStateCollector
from mesos_exporter.services.master_client import MasterClient

MASTER_URL = "http://mesos-master:5050"
SLAVE_1 = "slave(1)@10.0.0.1:5051"
SLAVE_2 = "slave(1)@10.0.0.2:5051"


@pytest.fixture
def master_url():
    """Base URL of the mocked Mesos master."""
    return MASTER_URL


@pytest.fixture
def state_url(master_url):
    return f"{master_url}/state"


@pytest.fixture
def test_settings(master_url):
    return Settings(mesos_master_url=master_url, scrape_timeout=1.0)


@pytest.fixture
def test_app(test_settings):
    """A fresh exporter app with its own registry."""
    return create_app(test_settings)


@pytest.fixture
def test_client(test_app):
    """Provide a FastAPI TestClient instance."""
    return TestClient(test_app)


@pytest.fixture
def master_client(master_url):
    return MasterClient(master_url, timeout=1.0)


@pytest.fixture
def master_metrics():
    return MasterMetrics()


@pytest.fixture
def collector(master_client, master_metrics):
    return MasterStateCollector(master_client, master_metrics)


@pytest.fixture
def mock_mesos_state_response():
    """Mock Mesos master /state JSON response."""
    return {
        "version": "1.11.0",
        "hostname": "mesos-master",
        "slaves": [
            {
                "id": "S1",
                "pid": SLAVE_1,
                "hostname": "agent-1",
                "resources": {
                    "cpus": 4.0,
                    "mem": 2.0,
                    "disk": 100.0,
                    "ports": "[31000-32000]",
                },
                "used_resources": {
                    "cpus": 1.5,
                    "mem": 1.0,
                    "disk": 10.0,
                    "ports": "[31000-31004, 31010-31010]",
                },
                "unreserved_resources": {
                    "cpus": 2.5,
                    "mem": 1.0,
                    "disk": 90.0,
                    "ports": "[31005-31009, 31011-32000]",
                },
            },
            {
                "id": "S2",
                "pid": SLAVE_2,
                "hostname": "agent-2",
                "resources": {
                    "cpus": 8,
                    "mem": 4096,
                    "disk": 0,
                    "ports": "[]",
                },
            },
        ],
        "frameworks": [
            {
                "id": "fw-1",
                "name": "marathon",
                "active": True,
                "tasks": [
                    {
                        "id": "task-running",
                        "name": "api",
                        "executor_id": "exec-0",
                        "framework_id": "fw-1",
                        "slave_id": "S1",
                        "state": "TASK_RUNNING",
                        "statuses": [{"state": "TASK_RUNNING", "timestamp": 10.0}],
                    }
                ],
                "completed_tasks": [
                    {
                        "id": "task-1",
                        "name": "web",
                        "executor_id": "exec-1",
                        "framework_id": "fw-1",
                        "slave_id": "S1",
                        "state": "TASK_FINISHED",
                        "labels": [{"key": "team", "value": "infra"}],
                        "resources": {"cpus": 0.5, "mem": 128, "disk": 0, "ports": "[31010-31010]"},
                        "statuses": [
                            {"state": "TASK_FINISHED", "timestamp": 100.0},
                            {"state": "TASK_RUNNING", "timestamp": 50.0},
                        ],
                    },
                    {
                        "id": "task-2",
                        "name": "batch",
                        "executor_id": "exec-2",
                        "framework_id": "fw-1",
                        "slave_id": "S2",
                        "state": "TASK_LOST",
                        "statuses": [],
                    },
                ],
            },
            {
                "id": "fw-2",
                "name": "chronos",
                "active": False,
                "completed_tasks": [
                    {
                        "id": "task-3",
                        "name": "cron",
                        "executor_id": "exec-3",
                        "framework_id": "fw-2",
                        "slave_id": "S2",
                        "state": "TASK_FAILED",
                        "statuses": [{"state": "TASK_FAILED", "timestamp": 70.0}],
                    }
                ],
            },
        ],
    }
