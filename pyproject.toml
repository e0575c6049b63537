[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flasharray-metrics"
version = "1.0.5"
description = "Typed models for FlashArray REST API responses and OpenMetrics gauges for pod and volume space and volume performance"
requires-python = ">=3.10"
dependencies = []
keywords = ["flasharray", "storage", "metrics", "openmetrics", "prometheus", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flasharray_metrics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
