"""SilenceCut: silence detection and ripple-delete planning for an editor panel."""
