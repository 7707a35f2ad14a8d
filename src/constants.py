"""Infrastructure and technical constants."""

from typing import Final

# Technical configuration constants
DEFAULT_PORT: Final = 80
DEFAULT_METRICS_PORT: Final = 8080

# Fixed response bodies
HEALTHY_MESSAGE: Final = "Healthy!"
NO_SUCH_ROUTE_MESSAGE: Final = "Ooops, no such route"

GREETING_PAGE: Final = """
<head>
  <title>Blue-Green deployment</title>
</head>

<body style="background-color: cornflowerblue;">
  <h1 style="color: white; text-align: center;">
    Hello from AWS Fargate
  </h1>
</body>
"""
