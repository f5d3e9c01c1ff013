"""HTTP request and response types shared by the pipeline and tests."""
