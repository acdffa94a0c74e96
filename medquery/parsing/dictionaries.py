"""Static lookup tables used by the job query parser.

Every table is ordered: for single-valued fields (location, job type,
company) the first entry that matches wins, so reordering entries changes
parser output.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# Lookup key (lower-case) -> title expansions
ROLE_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "jr": ("Junior Resident", "JR", "Junior Resident Doctor"),
    "mo": ("Medical Officer", "MO", "Medical Officer Doctor"),
    "sr": ("Senior Resident", "SR", "Senior Resident Doctor"),
    "consultant": ("Consultant", "Senior Consultant", "Consultant Doctor"),
    "nurse": ("Nurse", "Nursing", "Staff Nurse", "Nursing Staff"),
    "doctor": ("Doctor", "Physician", "Medical Doctor", "MD"),
    "surgeon": ("Surgeon", "Surgical", "Surgery"),
    "anesthetist": ("Anesthetist", "Anaesthetist", "Anesthesiologist"),
    "radiologist": ("Radiologist", "Radiology"),
    "pathologist": ("Pathologist", "Pathology"),
    "gynecologist": ("Gynecologist", "Gynaecologist", "OBGYN"),
    "pediatrician": ("Pediatrician", "Paediatrician", "Pediatrics"),
    "cardiologist": ("Cardiologist", "Cardiology"),
    "orthopedic": ("Orthopedic", "Orthopaedics", "Orthopedic Surgeon"),
    "dermatologist": ("Dermatologist", "Dermatology"),
    "psychiatrist": ("Psychiatrist", "Psychiatry"),
    "neurologist": ("Neurologist", "Neurology"),
    "ophthalmologist": ("Ophthalmologist", "Ophthalmology"),
    "ent": ("ENT", "Ear Nose Throat", "Otolaryngologist"),
    "physiotherapist": ("Physiotherapist", "Physical Therapist", "Physiotherapy"),
    "pharmacist": ("Pharmacist", "Pharmacy"),
    "lab technician": ("Lab Technician", "Laboratory Technician", "Lab Tech"),
    "x-ray technician": ("X-Ray Technician", "Radiology Technician"),
    "operation theatre": ("OT Technician", "Operation Theatre Technician", "OT Tech"),
})

QUALIFICATIONS: Tuple[str, ...] = (
    "MBBS", "BDS", "BAMS", "BHMS", "BUMS", "BVSc",
    "MD", "MS", "DM", "MCh", "DNB", "MDS",
    "BSc Nursing", "GNM", "ANM", "BPT", "BPharm", "DPharm",
    "MSc Nursing", "MPT", "MPharm", "PhD",
    "Diploma", "PG Diploma", "Certificate",
)

# Phrases added to synonyms whenever the qualification itself is matched
QUALIFICATION_SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "MBBS": ("Bachelor of Medicine", "Bachelor of Surgery"),
    "MD": ("Doctor of Medicine", "Post Graduate"),
    "MS": ("Master of Surgery", "Post Graduate"),
})

DEPARTMENTS: Tuple[str, ...] = (
    "Cardiology", "Orthopedics", "Pediatrics", "Gynecology", "Obstetrics",
    "Neurology", "Neurosurgery", "Psychiatry", "Dermatology", "Ophthalmology",
    "ENT", "Anesthesiology", "Radiology", "Pathology", "Microbiology",
    "General Medicine", "General Surgery", "Emergency", "ICU", "CCU",
    "Oncology", "Urology", "Nephrology", "Gastroenterology", "Pulmonology",
    "Endocrinology", "Rheumatology", "Hematology", "Immunology",
)

CITIES: Tuple[str, ...] = (
    "Mumbai", "Delhi", "Bangalore", "Hyderabad", "Chennai", "Kolkata",
    "Pune", "Ahmedabad", "Jaipur", "Surat", "Lucknow", "Kanpur",
    "Nagpur", "Indore", "Thane", "Bhopal", "Visakhapatnam", "Patna",
    "Vadodara", "Ghaziabad", "Ludhiana", "Agra", "Nashik", "Faridabad",
    "Meerut", "Rajkot", "Varanasi", "Srinagar", "Amritsar", "Chandigarh",
    "Kochi", "Coimbatore", "Madurai", "Mysore", "Mangalore", "Hubli",
    "Vijayawada", "Guntur", "Warangal", "Raipur", "Bhilai", "Bhubaneswar",
    "Cuttack", "Rourkela", "Jamshedpur", "Ranchi", "Dhanbad", "Bokaro",
    "Guwahati", "Silchar", "Dibrugarh", "Imphal", "Aizawl", "Shillong",
    "Agartala", "Kohima", "Itanagar", "Gangtok", "Dehradun", "Haridwar",
    "Nainital", "Shimla", "Dharamshala", "Jammu", "Leh", "Udaipur",
    "Jodhpur", "Bikaner", "Ajmer", "Kota", "Bhilwara", "Alwar",
    "Gurgaon", "Noida", "Greater Noida", "Faridabad", "Panipat", "Karnal",
    "Ambala", "Yamunanagar", "Rohtak", "Hisar", "Sonipat", "Rewari",
)

STATES: Tuple[str, ...] = (
    "Maharashtra", "Karnataka", "Tamil Nadu", "Kerala", "Andhra Pradesh",
    "Telangana", "Gujarat", "Rajasthan", "Madhya Pradesh", "Uttar Pradesh",
    "West Bengal", "Bihar", "Odisha", "Punjab", "Haryana", "Himachal Pradesh",
    "Uttarakhand", "Jammu and Kashmir", "Assam", "Manipur", "Meghalaya",
    "Mizoram", "Nagaland", "Tripura", "Arunachal Pradesh", "Sikkim", "Goa",
)

# Cities are scanned before states
LOCATIONS: Tuple[str, ...] = CITIES + STATES

JOB_TYPES: Tuple[str, ...] = (
    "full time", "full-time", "part time", "part-time", "contract",
    "permanent", "temporary", "internship", "residency", "fellowship",
    "government", "private", "public", "contractual",
)

COMPANY_KEYWORDS: Tuple[str, ...] = (
    "hospital", "clinic", "medical college", "university", "institute",
    "healthcare", "pharma", "pharmaceutical", "diagnostic", "laboratory",
    "government", "private", "public sector", "corporate",
)

# Common misspelling -> correction
TYPO_CORRECTIONS: Mapping[str, str] = MappingProxyType({
    "docter": "doctor",
    "nurce": "nurse",
    "nursing": "nurse",
    "cardialogist": "cardiologist",
    "orthopedic": "orthopedics",
    "pediatrician": "pediatrics",
})
