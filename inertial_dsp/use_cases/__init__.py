from .process_signal import ProcessSignalUseCase, ProcessRequest, ProcessReport, ChannelReport

__all__ = ["ProcessSignalUseCase", "ProcessRequest", "ProcessReport", "ChannelReport"]
