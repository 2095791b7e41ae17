"""Album domain: entity, ports, validation and the resource handler."""
