"""
Sample records shared by the test scripts.

Every builder returns a fresh object; keyword arguments override defaults.
"""

from placement_scoring.schemas.schemas import (
    Academics,
    Eligibility,
    Experience,
    Job,
    PersonalInfo,
    Project,
    Skills,
    StudentProfile,
)


def make_student(
    cgpa=8.5,
    branch="CSE",
    backlogs=0,
    batch=2021,
    tenth_marks=0.0,
    twelfth_marks=0.0,
    skills=None,
    projects=0,
    experience=0,
    **personal
) -> StudentProfile:
    """Student from scenario A by default: CSE 2021, CGPA 8.5, knows React."""
    return StudentProfile(
        user_id="65f1c0ffee0000000000beef",
        personal_info=PersonalInfo(branch=branch, batch=batch, **personal),
        academics=Academics(
            cgpa=cgpa,
            tenth_marks=tenth_marks,
            twelfth_marks=twelfth_marks,
            backlogs=backlogs
        ),
        skills=skills if skills is not None else Skills(programming=["React"]),
        projects=[Project(title=f"Project {i}") for i in range(projects)],
        experience=[Experience(company=f"Company {i}", role="Intern") for i in range(experience)],
    )


def make_job(
    minimum_cgpa=7.0,
    branches=("CSE", "IT"),
    allow_backlogs=False,
    max_backlogs=0,
    batch=(2021,),
    required_skills=("React",),
    **fields
) -> Job:
    """Job from scenario A by default: CSE/IT, CGPA 7.0+, no backlogs, batch 2021."""
    return Job(
        eligibility=Eligibility(
            branches=list(branches),
            minimum_cgpa=minimum_cgpa,
            allow_backlogs=allow_backlogs,
            max_backlogs=max_backlogs,
            batch=list(batch),
            required_skills=list(required_skills)
        ),
        **fields
    )


def make_complete_student() -> StudentProfile:
    """Fully filled profile with mid-range numbers."""
    return StudentProfile(
        user_id="65f1c0ffee0000000000cafe",
        personal_info=PersonalInfo(
            first_name="Asha",
            last_name="Rao",
            phone="9876543210",
            roll_number="21CSE042",
            branch="CSE",
            batch=2021,
            current_semester=7
        ),
        academics=Academics(cgpa=8.0, tenth_marks=90, twelfth_marks=80, backlogs=0),
        skills=Skills(
            technical=["DSA", "OOP"],
            programming=["Python", "Java"],
            frameworks=["Django"],
            tools=["Git"]
        ),
        projects=[Project(title="Placement tracker"), Project(title="Chat app")],
        experience=[Experience(company="Startup XYZ", role="Intern", type="internship")],
    )
