"""IoT fleet management API."""
