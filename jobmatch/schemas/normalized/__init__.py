from .jd import StructuredJD
from .match import AnalysisResult, MatchAnalysis, clamp_score
from .metadata import CompanyMetadata, JobMetadataResponse, JobPostingMetadata, ParsedJobMetadata
from .resume import EducationEntry, ExperienceEntry, InferredExperience, ProjectEntry, StructuredResume
from .tailored import TailoredExperience, TailoredProject, TailoredResume

__all__ = [
    "StructuredJD",
    "EducationEntry",
    "InferredExperience",
    "ExperienceEntry",
    "ProjectEntry",
    "StructuredResume",
    "CompanyMetadata",
    "JobPostingMetadata",
    "ParsedJobMetadata",
    "JobMetadataResponse",
    "MatchAnalysis",
    "AnalysisResult",
    "clamp_score",
    "TailoredExperience",
    "TailoredProject",
    "TailoredResume",
]
