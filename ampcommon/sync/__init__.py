"""File-synchronization event types."""