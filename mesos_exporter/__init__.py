"""Prometheus exporter for Mesos master /state snapshots."""
