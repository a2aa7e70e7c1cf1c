import logging

from sqlalchemy import func
from sqlmodel import Session, select

from .models import Employee, Task, TaskPriority, TaskStatus
from .models.employee import utcnow

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    ("Raj Patel", "raj.patel@company.com", "Engineering", "Senior Developer"),
    ("Priya Sharma", "priya.sharma@company.com", "Marketing", "Content Manager"),
    ("Arjun Singh", "arjun.singh@company.com", "Sales", "Sales Representative"),
    ("Divya Gupta", "divya.gupta@company.com", "HR", "HR Manager"),
    ("Aditya Kumar", "aditya.kumar@company.com", "Engineering", "Frontend Developer"),
    ("Neha Malhotra", "neha.malhotra@company.com", "Design", "UI/UX Designer"),
    ("Rohan Verma", "rohan.verma@company.com", "Product", "Product Manager"),
    ("Anjali Nair", "anjali.nair@company.com", "Finance", "Financial Analyst"),
]

# (title, description, status, employee index, due date, priority)
SAMPLE_TASKS = [
    ("Fix login authentication bug", "Users cannot login with special characters in password", "in-progress", 0, "2025-02-01", "high"),
    ("Implement user dashboard", "Create main dashboard with key metrics", "pending", 0, "2025-02-15", "high"),
    ("Code review for API endpoints", "Review and approve new REST API endpoints", "completed", 0, "2025-01-20", "medium"),
    ("Create Q1 marketing campaign", "Design and launch Q1 digital marketing campaign", "in-progress", 1, "2025-02-28", "high"),
    ("Update social media content", "Refresh company social media profiles", "pending", 1, "2025-02-10", "low"),
    ("Write blog post on new features", "Technical blog post about latest product updates", "completed", 1, "2025-01-15", "medium"),
    ("Contact enterprise leads", "Follow up with potential enterprise clients", "in-progress", 2, "2025-02-05", "high"),
    ("Prepare sales presentation", "Create Q1 sales deck for team meeting", "pending", 2, "2025-02-20", "medium"),
    ("Update CRM records", "Clean and update customer database", "completed", 2, "2025-01-18", "low"),
    ("Conduct employee interviews", "Interview candidates for open positions", "in-progress", 3, "2025-02-08", "high"),
    ("Update employee handbook", "Review and update company policies", "pending", 3, "2025-03-01", "medium"),
    ("Plan team building event", "Organize quarterly team building activity", "completed", 3, "2025-01-25", "low"),
    ("Optimize database queries", "Improve performance of slow database operations", "pending", 4, "2025-02-12", "high"),
    ("Build responsive components", "Create mobile-responsive UI components", "in-progress", 4, "2025-02-18", "medium"),
    ("Fix CSS styling issues", "Resolve cross-browser compatibility problems", "completed", 4, "2025-01-22", "low"),
    ("Design new landing page", "Create mockups for product landing page", "in-progress", 5, "2025-02-14", "high"),
    ("Create icon set", "Design custom icons for the application", "pending", 5, "2025-02-25", "medium"),
    ("User research interviews", "Conduct UX research with target users", "completed", 5, "2025-01-28", "medium"),
    ("Write product requirements", "Document PRD for new feature release", "in-progress", 6, "2025-02-10", "high"),
    ("Analyze user feedback", "Review and categorize customer feedback", "pending", 6, "2025-02-22", "medium"),
    ("Roadmap planning session", "Plan product roadmap for Q2", "completed", 6, "2025-01-30", "high"),
    ("Prepare financial report", "Create monthly financial summary", "pending", 7, "2025-02-05", "high"),
    ("Budget analysis for Q1", "Analyze department budget allocations", "in-progress", 7, "2025-02-15", "medium"),
    ("Audit expense reports", "Review and approve team expenses", "completed", 7, "2025-01-20", "low"),
]


def seed_database(db: Session) -> bool:
    """Insert the sample data into an empty database.

    Returns False without touching anything once any employee exists.
    """
    employee_count = db.exec(select(func.count(Employee.id))).one()
    if employee_count > 0:
        logger.info("Database already has data, skipping seed")
        return False

    employees = [
        Employee(name=name, email=email, department=department, position=position)
        for name, email, department, position in SAMPLE_EMPLOYEES
    ]
    db.add_all(employees)
    db.flush()

    now = utcnow()
    for title, description, status, owner, due_date, priority in SAMPLE_TASKS:
        db.add(Task(
            title=title,
            description=description,
            status=TaskStatus(status),
            employee_id=employees[owner].id,
            due_date=due_date,
            priority=TaskPriority(priority),
            created_at=now,
            updated_at=now,
        ))

    db.commit()
    logger.info(f"Database seeded with {len(employees)} employees and {len(SAMPLE_TASKS)} tasks")
    return True
