from .parallel_processor import ParallelProcessor
