"""TraceScore compute nodes.

Each node is a thin async shell over pure handler functions:

    node_trace_event_parser_compute  raw trace -> ModelTrace
    node_timeline_model_compute      ModelTrace -> ModelTimelineModel
    node_quiet_window_compute        ModelTimelineModel -> first interactive
    node_metric_audit_compute        artifacts -> scored ModelAuditResult
"""
