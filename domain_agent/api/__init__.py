"""Wire contract of the domain-agent backend API."""
