"""Domain layer: pure logic with no infrastructure dependencies."""
