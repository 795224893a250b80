"""Platform adapters: logging, clipboard and notifications."""
