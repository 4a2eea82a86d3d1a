"""Application layer: session state machine and the commands driving it."""
