# common/data_access.py

"""
Demo data for every PMS page.

There is no backend: each getter returns a fresh copy of hand-entered
records, so a page can mutate what it gets without touching anyone
else's copy. Counts such as `employee_count` are typed in, never derived.
"""

import copy

_DEPARTMENTS = [
    {"id": "dept-001", "name": "Engineering", "code": "ENG", "description": "Product engineering and platform teams",
     "org_id": "org-001", "opr_id": "opr-001", "head_id": "user-manager", "head_name": "Michael Chen",
     "review_period": "Q", "budget_code": "ENG-2025", "location": "Bangalore", "employee_count": 45,
     "is_active": True, "created_by": "admin", "created_on": "2024-01-10"},
    {"id": "dept-002", "name": "Human Resources", "code": "HR", "description": "People operations and talent",
     "org_id": "org-001", "opr_id": "opr-001", "head_id": "user-hr", "head_name": "Sarah Williams",
     "review_period": "H", "budget_code": "HR-2025", "location": "Mumbai", "employee_count": 12,
     "is_active": True, "created_by": "admin", "created_on": "2024-01-10"},
    {"id": "dept-003", "name": "Sales & Marketing", "code": "SAL", "description": "Revenue, brand and growth",
     "org_id": "org-001", "opr_id": "opr-002", "head_id": "user-raj", "head_name": "Raj Patel",
     "review_period": "Q", "budget_code": "SAL-2025", "location": "Delhi", "employee_count": 28,
     "is_active": True, "created_by": "admin", "created_on": "2024-01-12"},
    {"id": "dept-004", "name": "Finance", "code": "FIN", "description": "Accounting, planning and payroll",
     "org_id": "org-001", "opr_id": "opr-002", "head_id": "user-priya", "head_name": "Priya Sharma",
     "review_period": "Y", "budget_code": "FIN-2025", "location": "Mumbai", "employee_count": 15,
     "is_active": True, "created_by": "admin", "created_on": "2024-01-15"},
]

_DOMAINS = [
    {"id": "domain-001", "name": "Development", "code": "DEV", "description": "Software development and programming",
     "skills": ["React", "Node.js", "Python", "TypeScript", "AWS", "Docker"],
     "certifications": ["AWS Certified Developer", "Google Cloud Professional", "Microsoft Azure"],
     "employee_count": 35, "is_active": True, "created_by": "admin", "created_on": "2024-01-15"},
    {"id": "domain-002", "name": "Quality Assurance", "code": "QA", "description": "Software testing and quality assurance",
     "skills": ["Selenium", "Jest", "Cypress", "Manual Testing", "API Testing", "Performance Testing"],
     "certifications": ["ISTQB Certified", "Agile Testing Certified", "Automation Testing Expert"],
     "employee_count": 18, "is_active": True, "created_by": "admin", "created_on": "2024-01-15"},
    {"id": "domain-003", "name": "DevOps", "code": "DEVOPS", "description": "Development operations and infrastructure",
     "skills": ["Kubernetes", "Jenkins", "Terraform", "Ansible", "Monitoring", "CI/CD"],
     "certifications": ["AWS DevOps Engineer", "Kubernetes Certified", "Docker Certified"],
     "employee_count": 12, "is_active": True, "created_by": "admin", "created_on": "2024-01-20"},
    {"id": "domain-004", "name": "Marketing", "code": "MKT", "description": "Digital marketing and brand management",
     "skills": ["SEO", "Content Marketing", "Social Media", "Analytics", "Email Marketing", "PPC"],
     "certifications": ["Google Ads Certified", "HubSpot Certified", "Facebook Blueprint"],
     "employee_count": 22, "is_active": True, "created_by": "admin", "created_on": "2024-01-10"},
    {"id": "domain-005", "name": "Data Science", "code": "DS", "description": "Data analysis and machine learning",
     "skills": ["Python", "R", "Machine Learning", "SQL", "Tableau", "TensorFlow"],
     "certifications": ["Google Data Engineer", "Microsoft Data Scientist", "Tableau Desktop Specialist"],
     "employee_count": 8, "is_active": True, "created_by": "admin", "created_on": "2024-02-01"},
]

_PROJECTS = [
    {"id": "proj-001", "name": "Web Platform Modernization", "code": "WPM2025",
     "description": "Move the customer web platform to the new component stack",
     "department_name": "Engineering", "domain_name": "Development", "lead_name": "Jessica Wong",
     "manager_name": "Michael Chen", "start_date": "2025-01-01", "end_date": "2025-12-31",
     "status": "ACTIVE", "priority": "HIGH", "budget": 500000, "team_size": 12,
     "is_active": True, "created_by": "admin", "created_on": "2024-12-15"},
    {"id": "proj-002", "name": "Mobile App Development", "code": "MAD2025",
     "description": "Native mobile companion app for the platform",
     "department_name": "Engineering", "domain_name": "Development", "lead_name": "Alex Kumar",
     "manager_name": "Michael Chen", "start_date": "2025-02-01", "end_date": "2025-10-31",
     "status": "ACTIVE", "priority": "HIGH", "budget": 350000, "team_size": 8,
     "is_active": True, "created_by": "admin", "created_on": "2025-01-10"},
    {"id": "proj-003", "name": "Quality Automation Framework", "code": "QAF2025",
     "description": "Shared end-to-end test automation framework",
     "department_name": "Engineering", "domain_name": "Quality Assurance", "lead_name": "Priya Desai",
     "manager_name": "Michael Chen", "start_date": "2025-01-15", "end_date": "2025-06-30",
     "status": "ACTIVE", "priority": "MEDIUM", "budget": 200000, "team_size": 6,
     "is_active": True, "created_by": "admin", "created_on": "2025-01-05"},
    {"id": "proj-004", "name": "HR Portal Enhancement", "code": "HPE2024",
     "description": "Self-service improvements to the HR portal",
     "department_name": "Human Resources", "domain_name": "Development", "lead_name": "Rahul Singh",
     "manager_name": "Sarah Williams", "start_date": "2024-06-01", "end_date": "2024-12-31",
     "status": "COMPLETED", "priority": "MEDIUM", "budget": 150000, "team_size": 4,
     "is_active": True, "created_by": "admin", "created_on": "2024-05-20"},
]

_KRAS = [
    {"id": "kra-001", "title": "Code Quality & Review", "description": "Maintain high code quality through reviews and standards",
     "category": "INDIVIDUAL", "department": "Engineering", "domain": "Development", "weightage": 25,
     "measurement_criteria": "Code review score and defect density", "target_value": "4.0/5",
     "frequency": "QUARTERLY", "is_active": True, "created_by": "admin", "created_on": "2024-01-15"},
    {"id": "kra-002", "title": "Project Delivery", "description": "Deliver committed scope on time",
     "category": "INDIVIDUAL", "department": "Engineering", "domain": "Development", "weightage": 30,
     "measurement_criteria": "Milestones delivered on schedule", "target_value": "90%",
     "frequency": "QUARTERLY", "is_active": True, "created_by": "admin", "created_on": "2024-01-15"},
    {"id": "kra-003", "title": "Team Collaboration", "description": "Contribute to team goals and knowledge sharing",
     "category": "TEAM", "department": "Engineering", "domain": "Development", "weightage": 20,
     "measurement_criteria": "Peer feedback score", "target_value": "4.0/5",
     "frequency": "HALF_YEARLY", "is_active": True, "created_by": "admin", "created_on": "2024-01-20"},
    {"id": "kra-004", "title": "Innovation & Learning", "description": "Learn new skills and bring new ideas",
     "category": "INDIVIDUAL", "department": "Engineering", "domain": "Development", "weightage": 15,
     "measurement_criteria": "Certifications and proposals", "target_value": "2 per year",
     "frequency": "YEARLY", "is_active": True, "created_by": "admin", "created_on": "2024-01-20"},
    {"id": "kra-005", "title": "Customer Satisfaction", "description": "Keep internal and external customers happy",
     "category": "ORGANIZATIONAL", "department": "Sales & Marketing", "domain": "Marketing", "weightage": 10,
     "measurement_criteria": "CSAT survey score", "target_value": "85%",
     "frequency": "MONTHLY", "is_active": True, "created_by": "admin", "created_on": "2024-02-01"},
]

_EMPLOYEES = [
    {"id": "emp-001", "employee_id": "EMP001", "name": "Sarah Johnson", "email": "employee@company.com",
     "phone": "+91 98450 00001", "role": "EMPLOYEE", "department": "Engineering", "domain": "Development",
     "project": "Web Platform", "manager": "Michael Chen", "join_date": "2022-03-15", "status": "Active",
     "last_login": "2025-03-01 09:12", "r1_reviewer": "Jessica Wong", "r2_reviewer": "Michael Chen"},
    {"id": "emp-002", "employee_id": "EMP002", "name": "Michael Chen", "email": "manager@company.com",
     "phone": "+91 98450 00002", "role": "MANAGER", "department": "Engineering", "domain": "Development",
     "project": "Web Platform", "manager": "System Administrator", "join_date": "2019-07-01", "status": "Active",
     "last_login": "2025-03-01 08:40", "r1_reviewer": "Sarah Williams", "r2_reviewer": None},
    {"id": "emp-003", "employee_id": "EMP003", "name": "Jessica Wong", "email": "teamlead@company.com",
     "phone": "+91 98450 00003", "role": "TEAMLEAD", "department": "Engineering", "domain": "Development",
     "project": "Mobile App", "manager": "Michael Chen", "join_date": "2020-11-02", "status": "Active",
     "last_login": "2025-02-28 17:05", "r1_reviewer": "Michael Chen", "r2_reviewer": "Sarah Williams"},
    {"id": "emp-004", "employee_id": "EMP004", "name": "Sarah Williams", "email": "hr@company.com",
     "phone": "+91 98450 00004", "role": "HR", "department": "Human Resources", "domain": "HR Operations",
     "project": None, "manager": "System Administrator", "join_date": "2018-04-09", "status": "Active",
     "last_login": "2025-03-01 10:01", "r1_reviewer": None, "r2_reviewer": None},
    {"id": "emp-005", "employee_id": "EMP005", "name": "Alex Kumar", "email": "alex.kumar@company.com",
     "phone": "+91 98450 00005", "role": "EMPLOYEE", "department": "Engineering", "domain": "Development",
     "project": "Mobile App", "manager": "Jessica Wong", "join_date": "2023-01-16", "status": "Active",
     "last_login": "2025-02-27 11:30", "r1_reviewer": "Jessica Wong", "r2_reviewer": None},
    {"id": "emp-006", "employee_id": "EMP006", "name": "Priya Desai", "email": "priya.desai@company.com",
     "phone": "+91 98450 00006", "role": "EMPLOYEE", "department": "Engineering", "domain": "Quality Assurance",
     "project": "Quality Automation Framework", "manager": "Michael Chen", "join_date": "2021-09-20",
     "status": "Active", "last_login": "2025-02-26 15:45", "r1_reviewer": None, "r2_reviewer": None},
    {"id": "emp-007", "employee_id": "EMP007", "name": "Rahul Singh", "email": "rahul.singh@company.com",
     "phone": "+91 98450 00007", "role": "EMPLOYEE", "department": "Human Resources", "domain": "Development",
     "project": "HR Portal Enhancement", "manager": "Sarah Williams", "join_date": "2024-02-05",
     "status": "Pending", "last_login": None, "r1_reviewer": "Sarah Williams", "r2_reviewer": None},
    {"id": "emp-008", "employee_id": "EMP008", "name": "Emily Davis", "email": "emily.davis@company.com",
     "phone": "+91 98450 00008", "role": "EMPLOYEE", "department": "Sales & Marketing", "domain": "Marketing",
     "project": None, "manager": "Raj Patel", "join_date": "2020-05-11", "status": "Inactive",
     "last_login": "2024-11-30 09:00", "r1_reviewer": "Raj Patel", "r2_reviewer": None},
]

_MY_GOALS = [
    {"id": "goal-001", "title": "Complete AWS Solutions Architect Certification",
     "description": "Obtain AWS Solutions Architect certification to enhance cloud skills",
     "category": "TECHNICAL", "priority": "HIGH", "status": "ACTIVE", "progress": 75,
     "target_date": "2025-03-31", "start_date": "2025-01-01", "achievement": "IN_PROGRESS",
     "kra_id": "kra-004", "kra_name": "Innovation & Learning", "evidence_count": 3, "manager_approved": True,
     "target_value": "100", "current_value": "75", "measurement_unit": "%",
     "milestones": ["Complete course modules", "Pass practice exams", "Schedule certification exam", "Pass certification"],
     "tags": ["cloud", "certification"], "created_on": "2025-01-01"},
    {"id": "goal-002", "title": "Lead Cross-functional Project Initiative",
     "description": "Lead a cross-functional project with 5+ team members to improve development workflow",
     "category": "LEADERSHIP", "priority": "HIGH", "status": "ACTIVE", "progress": 45,
     "target_date": "2025-06-30", "start_date": "2025-02-01", "achievement": "IN_PROGRESS",
     "kra_id": "kra-003", "kra_name": "Team Collaboration", "evidence_count": 2, "manager_approved": True,
     "target_value": "1", "current_value": "0", "measurement_unit": "project",
     "milestones": ["Team formation", "Project planning", "Implementation", "Delivery"],
     "tags": ["leadership"], "created_on": "2025-02-01"},
    {"id": "goal-003", "title": "Implement Automated Code Review Process",
     "description": "Implement automated code review tools and reduce manual review time by 30%",
     "category": "PROFESSIONAL", "priority": "MEDIUM", "status": "COMPLETED", "progress": 100,
     "target_date": "2025-01-15", "start_date": "2024-12-01", "achievement": "EXCEEDED",
     "kra_id": "kra-001", "kra_name": "Code Quality & Review", "evidence_count": 5, "manager_approved": True,
     "target_value": "30", "current_value": "45", "measurement_unit": "% reduction",
     "milestones": ["Tool evaluation", "Implementation", "Team training", "Monitoring"],
     "tags": ["automation", "quality"], "created_on": "2024-12-01"},
    {"id": "goal-004", "title": "Mentor Junior Developers",
     "description": "Mentor 2 junior developers and help them reach their career goals",
     "category": "LEADERSHIP", "priority": "MEDIUM", "status": "ACTIVE", "progress": 60,
     "target_date": "2025-12-31", "start_date": "2025-01-15", "achievement": "IN_PROGRESS",
     "kra_id": None, "kra_name": None, "evidence_count": 4, "manager_approved": True,
     "target_value": "2", "current_value": "2", "measurement_unit": "developers",
     "milestones": ["Mentee selection", "Goal setting", "Regular check-ins", "Skills development"],
     "tags": ["mentoring"], "created_on": "2025-01-15"},
    {"id": "goal-005", "title": "Learn React Native Development",
     "description": "Complete a React Native course and build a mobile app prototype",
     "category": "PERSONAL", "priority": "LOW", "status": "ACTIVE", "progress": 30,
     "target_date": "2025-08-31", "start_date": "2025-02-15", "achievement": "IN_PROGRESS",
     "kra_id": None, "kra_name": None, "evidence_count": 1, "manager_approved": False,
     "target_value": "1", "current_value": "0", "measurement_unit": "app",
     "milestones": ["Course completion", "Basic app", "Advanced features", "Deployment"],
     "tags": ["mobile", "learning"], "created_on": "2025-02-15"},
]

_TEAM_MEMBERS = [
    {"id": "emp-001", "name": "Sarah Johnson", "designation": "Senior Developer", "department": "Engineering",
     "performance_score": 4.3, "goal_progress": 72, "active_goals": 4, "completed_goals": 1,
     "review_status": "In Progress", "zone": "GREEN", "last_review": "2025-01-31"},
    {"id": "emp-005", "name": "Alex Kumar", "designation": "Developer", "department": "Engineering",
     "performance_score": 3.8, "goal_progress": 55, "active_goals": 3, "completed_goals": 0,
     "review_status": "Not Started", "zone": "YELLOW", "last_review": "2024-12-15"},
    {"id": "emp-006", "name": "Priya Desai", "designation": "QA Engineer", "department": "Engineering",
     "performance_score": 4.5, "goal_progress": 88, "active_goals": 2, "completed_goals": 3,
     "review_status": "Completed", "zone": "GREEN", "last_review": "2025-02-10"},
    {"id": "emp-009", "name": "Daniel Lee", "designation": "Junior Developer", "department": "Engineering",
     "performance_score": 3.1, "goal_progress": 35, "active_goals": 3, "completed_goals": 0,
     "review_status": "Overdue", "zone": "RED", "last_review": "2024-10-01"},
    {"id": "emp-010", "name": "Nina Patel", "designation": "UI Designer", "department": "Engineering",
     "performance_score": 4.0, "goal_progress": 64, "active_goals": 2, "completed_goals": 2,
     "review_status": "Submitted", "zone": "GREEN", "last_review": "2025-02-01"},
]

_TEAM_GOALS = [
    {"id": "tgoal-001", "title": "Reduce production incidents by 40%", "owner": "Sarah Johnson",
     "category": "TECHNICAL", "priority": "CRITICAL", "status": "ACTIVE", "progress": 60,
     "target_date": "2025-06-30", "manager_approved": True},
    {"id": "tgoal-002", "title": "Ship offline mode for the mobile app", "owner": "Alex Kumar",
     "category": "TECHNICAL", "priority": "HIGH", "status": "ACTIVE", "progress": 40,
     "target_date": "2025-05-31", "manager_approved": True},
    {"id": "tgoal-003", "title": "Automate regression suite", "owner": "Priya Desai",
     "category": "PROFESSIONAL", "priority": "HIGH", "status": "COMPLETED", "progress": 100,
     "target_date": "2025-02-28", "manager_approved": True},
    {"id": "tgoal-004", "title": "Complete accessibility training", "owner": "Nina Patel",
     "category": "PERSONAL", "priority": "LOW", "status": "ACTIVE", "progress": 75,
     "target_date": "2025-04-30", "manager_approved": False},
    {"id": "tgoal-005", "title": "Onboard to payments domain", "owner": "Daniel Lee",
     "category": "PROFESSIONAL", "priority": "MEDIUM", "status": "ON_HOLD", "progress": 20,
     "target_date": "2025-03-31", "manager_approved": False},
]

_GOAL_TEMPLATES = [
    {"id": "tmpl-001", "title": "Cloud Certification", "description": "Earn a recognised cloud certification",
     "category": "TECHNICAL", "priority": "HIGH", "estimated_duration": 90, "target_value": "1",
     "measurement_unit": "certification", "milestones": ["Study plan", "Practice exams", "Certification"],
     "success_criteria": ["Certificate issued"], "required_skills": ["AWS", "Networking"],
     "difficulty": "INTERMEDIATE", "tags": ["cloud", "certification"], "is_public": True, "is_approved": True,
     "usage_count": 42, "rating": 4.6, "created_by_name": "HR Manager", "created_date": "2024-06-01",
     "department": "Engineering", "kra_alignment": ["Innovation & Learning"]},
    {"id": "tmpl-002", "title": "Mentoring Program", "description": "Mentor junior colleagues through a full cycle",
     "category": "LEADERSHIP", "priority": "MEDIUM", "estimated_duration": 180, "target_value": "2",
     "measurement_unit": "mentees", "milestones": ["Pairing", "Monthly check-ins", "Retrospective"],
     "success_criteria": ["Mentees meet their goals"], "required_skills": ["Communication"],
     "difficulty": "ADVANCED", "tags": ["mentoring", "leadership"], "is_public": True, "is_approved": True,
     "usage_count": 18, "rating": 4.3, "created_by_name": "Michael Chen", "created_date": "2024-07-12",
     "department": "Engineering", "kra_alignment": ["Team Collaboration"]},
    {"id": "tmpl-003", "title": "Process Automation", "description": "Automate a manual team process",
     "category": "PROFESSIONAL", "priority": "MEDIUM", "estimated_duration": 60, "target_value": "30",
     "measurement_unit": "% time saved", "milestones": ["Process audit", "Automation", "Rollout"],
     "success_criteria": ["Time saved measured"], "required_skills": ["Scripting"],
     "difficulty": "INTERMEDIATE", "tags": ["automation"], "is_public": True, "is_approved": False,
     "usage_count": 7, "rating": 4.0, "created_by_name": "Jessica Wong", "created_date": "2024-09-03",
     "department": "Engineering", "kra_alignment": ["Project Delivery"]},
    {"id": "tmpl-004", "title": "Customer NPS Improvement", "description": "Lift NPS for a customer segment",
     "category": "PROFESSIONAL", "priority": "HIGH", "estimated_duration": 120, "target_value": "10",
     "measurement_unit": "NPS points", "milestones": ["Baseline", "Initiatives", "Re-survey"],
     "success_criteria": ["NPS +10"], "required_skills": ["Customer research"],
     "difficulty": "EXPERT", "tags": ["customer"], "is_public": False, "is_approved": True,
     "usage_count": 11, "rating": 4.1, "created_by_name": "Raj Patel", "created_date": "2024-05-18",
     "department": "Sales & Marketing", "kra_alignment": ["Customer Satisfaction"]},
    {"id": "tmpl-005", "title": "Personal Wellbeing Plan", "description": "Build a sustainable work routine",
     "category": "PERSONAL", "priority": "LOW", "estimated_duration": 30, "target_value": "4",
     "measurement_unit": "weeks", "milestones": ["Plan", "Habit tracking"],
     "success_criteria": ["Routine kept for 4 weeks"], "required_skills": [],
     "difficulty": "BEGINNER", "tags": ["wellbeing"], "is_public": True, "is_approved": True,
     "usage_count": 25, "rating": 4.4, "created_by_name": "HR Manager", "created_date": "2024-08-20",
     "department": "Human Resources", "kra_alignment": []},
]

_GOAL_CATEGORIES = [
    {"category": "Technical Skills", "total_goals": 180, "completed": 145, "avg_rating": 4.2, "departments": 8},
    {"category": "Leadership", "total_goals": 95, "completed": 78, "avg_rating": 3.9, "departments": 6},
    {"category": "Customer Focus", "total_goals": 120, "completed": 98, "avg_rating": 4.1, "departments": 5},
    {"category": "Innovation", "total_goals": 75, "completed": 55, "avg_rating": 3.8, "departments": 4},
    {"category": "Collaboration", "total_goals": 200, "completed": 175, "avg_rating": 4.3, "departments": 8},
    {"category": "Process Improvement", "total_goals": 85, "completed": 62, "avg_rating": 4.0, "departments": 6},
]

_EVIDENCE = [
    {"id": "ev-001", "goal_id": "goal-001", "goal_title": "Complete AWS Solutions Architect Certification",
     "title": "Practice exam results", "description": "Scored 82% on the official practice exam",
     "type": "DOCUMENT", "file_name": "practice_exam.pdf", "link_url": None,
     "submitted_by": "user-employee", "submitted_by_name": "Sarah Johnson", "submitted_date": "2025-02-20",
     "status": "APPROVED", "reviewed_by_name": "Michael Chen", "reviewed_date": "2025-02-22",
     "review_comments": "Good progress", "rating": 4, "tags": ["aws"], "milestone": "Pass practice exams",
     "is_public": False, "version": 1, "category": "TECHNICAL"},
    {"id": "ev-002", "goal_id": "goal-002", "goal_title": "Lead Cross-functional Project Initiative",
     "title": "Project charter", "description": "Signed-off charter for the workflow initiative",
     "type": "DOCUMENT", "file_name": "charter.docx", "link_url": None,
     "submitted_by": "user-employee", "submitted_by_name": "Sarah Johnson", "submitted_date": "2025-02-25",
     "status": "PENDING", "reviewed_by_name": None, "reviewed_date": None, "review_comments": None,
     "rating": None, "tags": ["planning"], "milestone": "Project planning", "is_public": True,
     "version": 1, "category": "LEADERSHIP"},
    {"id": "ev-003", "goal_id": "goal-003", "goal_title": "Implement Automated Code Review Process",
     "title": "Review time dashboard", "description": "Dashboard showing 45% reduction in review time",
     "type": "LINK", "file_name": None, "link_url": "https://dashboards.company.com/review-time",
     "submitted_by": "user-employee", "submitted_by_name": "Sarah Johnson", "submitted_date": "2025-01-16",
     "status": "APPROVED", "reviewed_by_name": "Michael Chen", "reviewed_date": "2025-01-18",
     "review_comments": "Excellent outcome", "rating": 5, "tags": ["automation"], "milestone": "Monitoring",
     "is_public": True, "version": 2, "category": "PROFESSIONAL"},
    {"id": "ev-004", "goal_id": "goal-005", "goal_title": "Learn React Native Development",
     "title": "Course progress screenshot", "description": "Module 3 of 8 complete",
     "type": "IMAGE", "file_name": "progress.png", "link_url": None,
     "submitted_by": "user-employee", "submitted_by_name": "Sarah Johnson", "submitted_date": "2025-02-28",
     "status": "NEEDS_REVISION", "reviewed_by_name": "Jessica Wong", "reviewed_date": "2025-03-01",
     "review_comments": "Please attach the course certificate page", "rating": None, "tags": ["mobile"],
     "milestone": "Course completion", "is_public": False, "version": 1, "category": "PERSONAL"},
    {"id": "ev-005", "goal_id": "tgoal-002", "goal_title": "Ship offline mode for the mobile app",
     "title": "Offline sync design", "description": "Design doc for offline data sync",
     "type": "REPORT", "file_name": "offline_sync.pdf", "link_url": None,
     "submitted_by": "emp-005", "submitted_by_name": "Alex Kumar", "submitted_date": "2025-02-18",
     "status": "REJECTED", "reviewed_by_name": "Jessica Wong", "reviewed_date": "2025-02-19",
     "review_comments": "Conflict resolution section missing", "rating": 2, "tags": ["design"],
     "milestone": None, "is_public": False, "version": 1, "category": "TECHNICAL"},
]

_MY_REVIEWS = [
    {"id": "review-1", "title": "Annual Performance Review 2024", "type": "Self-Assessment", "cycle": "Annual 2024",
     "status": "In Progress", "due_date": "2025-03-15", "progress": 65, "reviewer": None,
     "kra_score": 4.2, "goal_score": 4.0, "overall_score": None},
    {"id": "review-2", "title": "Q1 Goal Review 2024", "type": "Goal-Review", "cycle": "Q1 2024",
     "status": "Completed", "due_date": "2024-01-31", "progress": 100, "reviewer": "Michael Chen",
     "kra_score": 4.1, "goal_score": 4.3, "overall_score": 4.2},
    {"id": "review-3", "title": "Manager Review - Michael Chen", "type": "Manager-Review", "cycle": "Annual 2024",
     "status": "Submitted", "due_date": "2025-03-20", "progress": 100, "reviewer": "Michael Chen",
     "kra_score": None, "goal_score": None, "overall_score": None},
    {"id": "review-4", "title": "Mid-Year Check-in 2024", "type": "Goal-Review", "cycle": "H1 2024",
     "status": "Completed", "due_date": "2024-07-15", "progress": 100, "reviewer": "Michael Chen",
     "kra_score": 3.8, "goal_score": 4.0, "overall_score": 3.9},
]

_PERFORMANCE_SUMMARY = {
    "current_score": 4.2, "previous_score": 3.9, "kra_progress": 75, "goal_progress": 85,
    "competency_progress": 70, "last_review_date": "2024-01-31",
}

_TEAM_REVIEWS = [
    {"id": "treview-1", "employee": "Sarah Johnson", "cycle": "Annual 2024", "stage": "Self-Assessment",
     "status": "In Progress", "due_date": "2025-03-15", "self_score": None, "manager_score": None},
    {"id": "treview-2", "employee": "Alex Kumar", "cycle": "Annual 2024", "stage": "Self-Assessment",
     "status": "Not Started", "due_date": "2025-03-15", "self_score": None, "manager_score": None},
    {"id": "treview-3", "employee": "Priya Desai", "cycle": "Annual 2024", "stage": "Manager Review",
     "status": "Completed", "due_date": "2025-03-15", "self_score": 4.4, "manager_score": 4.5},
    {"id": "treview-4", "employee": "Daniel Lee", "cycle": "Annual 2024", "stage": "Self-Assessment",
     "status": "Overdue", "due_date": "2025-02-28", "self_score": None, "manager_score": None},
    {"id": "treview-5", "employee": "Nina Patel", "cycle": "Annual 2024", "stage": "Manager Review",
     "status": "Submitted", "due_date": "2025-03-15", "self_score": 4.1, "manager_score": None},
]

_REVIEW_WORKFLOWS = [
    {"id": "wf-001", "name": "Standard Annual Review", "stages": ["Self-Assessment", "R1 Review", "R2 Review", "HR Calibration"],
     "applies_to": "All departments", "is_active": True, "auto_reminders": True, "reminder_days": 3},
    {"id": "wf-002", "name": "Quarterly Goal Check-in", "stages": ["Self-Assessment", "R1 Review"],
     "applies_to": "Engineering", "is_active": True, "auto_reminders": True, "reminder_days": 2},
    {"id": "wf-003", "name": "Probation Review", "stages": ["Manager Review", "HR Approval"],
     "applies_to": "New joiners", "is_active": False, "auto_reminders": False, "reminder_days": 5},
]

_REVIEW_CYCLE_STATS = [
    {"cycle": "Q1 2024", "completion_rate": 80, "avg_score": 3.9, "on_time_rate": 72},
    {"cycle": "Q2 2024", "completion_rate": 83, "avg_score": 4.0, "on_time_rate": 76},
    {"cycle": "Q3 2024", "completion_rate": 85, "avg_score": 4.05, "on_time_rate": 79},
    {"cycle": "Q4 2024", "completion_rate": 87, "avg_score": 4.08, "on_time_rate": 81},
    {"cycle": "Q1 2025", "completion_rate": 87, "avg_score": 4.1, "on_time_rate": 83},
]

_ORG_STATS = {
    "total_employees": 245, "active_employees": 238, "total_departments": 8,
    "overall_performance_score": 4.1, "review_completion_rate": 87, "goal_achievement_rate": 78,
    "pending_reviews": 23, "overdue_goals": 15,
}

_DEPARTMENT_METRICS = [
    {"id": "1", "name": "Engineering", "employee_count": 65, "avg_performance_score": 4.2,
     "goal_completion_rate": 82, "review_completion_rate": 90, "zones": {"GREEN": 45, "YELLOW": 15, "RED": 5}},
    {"id": "2", "name": "Product", "employee_count": 25, "avg_performance_score": 4.3,
     "goal_completion_rate": 85, "review_completion_rate": 95, "zones": {"GREEN": 20, "YELLOW": 4, "RED": 1}},
    {"id": "3", "name": "Sales", "employee_count": 45, "avg_performance_score": 4.4,
     "goal_completion_rate": 88, "review_completion_rate": 85, "zones": {"GREEN": 35, "YELLOW": 8, "RED": 2}},
    {"id": "4", "name": "Marketing", "employee_count": 30, "avg_performance_score": 4.0,
     "goal_completion_rate": 75, "review_completion_rate": 80, "zones": {"GREEN": 18, "YELLOW": 9, "RED": 3}},
    {"id": "5", "name": "Design", "employee_count": 18, "avg_performance_score": 3.9,
     "goal_completion_rate": 70, "review_completion_rate": 88, "zones": {"GREEN": 10, "YELLOW": 6, "RED": 2}},
    {"id": "6", "name": "HR", "employee_count": 15, "avg_performance_score": 4.1,
     "goal_completion_rate": 80, "review_completion_rate": 100, "zones": {"GREEN": 12, "YELLOW": 3, "RED": 0}},
    {"id": "7", "name": "Finance", "employee_count": 22, "avg_performance_score": 4.2,
     "goal_completion_rate": 85, "review_completion_rate": 95, "zones": {"GREEN": 18, "YELLOW": 3, "RED": 1}},
    {"id": "8", "name": "Operations", "employee_count": 25, "avg_performance_score": 3.8,
     "goal_completion_rate": 68, "review_completion_rate": 75, "zones": {"GREEN": 12, "YELLOW": 10, "RED": 3}},
]

_ORG_TREND = [
    {"period": "Q1 2024", "avg_score": 3.9, "goal_completion": 72, "review_completion": 80, "employee_count": 220},
    {"period": "Q2 2024", "avg_score": 4.0, "goal_completion": 75, "review_completion": 83, "employee_count": 230},
    {"period": "Q3 2024", "avg_score": 4.05, "goal_completion": 78, "review_completion": 85, "employee_count": 235},
    {"period": "Q4 2024", "avg_score": 4.08, "goal_completion": 80, "review_completion": 87, "employee_count": 240},
    {"period": "Q1 2025", "avg_score": 4.1, "goal_completion": 78, "review_completion": 87, "employee_count": 245},
]

_SYSTEM_ACTIVITIES = [
    {"id": "1", "type": "review_submitted", "description": "Q1 Performance Review submitted",
     "user": "Sarah Johnson", "department": "Engineering", "timestamp": "2 hours ago", "priority": "MEDIUM"},
    {"id": "2", "type": "goal_completed", "description": "Customer Satisfaction goal completed",
     "user": "Mike Chen", "department": "Product", "timestamp": "4 hours ago", "priority": "HIGH"},
    {"id": "3", "type": "goal_created", "description": "New leadership development goal created",
     "user": "Emily Davis", "department": "Design", "timestamp": "6 hours ago", "priority": "LOW"},
    {"id": "4", "type": "feedback_given", "description": "360 feedback provided for team member",
     "user": "Alex Turner", "department": "Engineering", "timestamp": "8 hours ago", "priority": "MEDIUM"},
    {"id": "5", "type": "review_submitted", "description": "Manager review submitted",
     "user": "Lisa Wang", "department": "Marketing", "timestamp": "1 day ago", "priority": "MEDIUM"},
]

_PERSONAL_TREND = [
    {"period": "Q1 2024", "score": 3.8, "goal_progress": 60},
    {"period": "Q2 2024", "score": 3.9, "goal_progress": 68},
    {"period": "Q3 2024", "score": 4.0, "goal_progress": 74},
    {"period": "Q4 2024", "score": 4.1, "goal_progress": 80},
    {"period": "Q1 2025", "score": 4.2, "goal_progress": 85},
]

_UPCOMING_DEADLINES = [
    {"title": "Annual self-assessment", "due_date": "2025-03-15", "type": "Review"},
    {"title": "AWS certification exam", "due_date": "2025-03-31", "type": "Goal"},
    {"title": "Mid-year goal check-in", "due_date": "2025-06-30", "type": "Review"},
]

_BULK_OPERATIONS = [
    {"id": "1", "type": "import", "name": "Q1 New Hires Import", "description": "Import 50 new employees from Q1 hiring",
     "status": "completed", "progress": 100, "total_records": 50, "processed_records": 50,
     "success_count": 48, "error_count": 2, "created_at": "2024-01-15 09:30", "completed_at": "2024-01-15 09:45",
     "errors": ["Invalid email format for John Doe", "Duplicate employee ID for Jane Smith"]},
    {"id": "2", "type": "update", "name": "Department Restructure",
     "description": "Update department assignments for Engineering team", "status": "paused", "progress": 65,
     "total_records": 120, "processed_records": 78, "success_count": 75, "error_count": 3,
     "created_at": "2024-01-15 10:00", "completed_at": None, "errors": []},
    {"id": "3", "type": "notify", "name": "Performance Review Reminder",
     "description": "Send review reminder emails to all active employees", "status": "pending", "progress": 0,
     "total_records": 200, "processed_records": 0, "success_count": 0, "error_count": 0,
     "created_at": "2024-01-15 11:00", "completed_at": None, "errors": []},
]

_IMPORT_PREVIEW = [
    {"name": "Alice Brown", "email": "alice.brown@company.com", "role": "EMPLOYEE", "department": "Engineering",
     "domain": "Frontend Development", "project": "Web Platform"},
    {"name": "Bob Wilson", "email": "invalid-email", "role": "EMPLOYEE", "department": "Marketing",
     "domain": "Digital Marketing", "project": None},
    {"name": "Charlie Davis", "email": "charlie.davis@company.com", "role": "INVALID_ROLE", "department": "Sales",
     "domain": "Sales Operations", "project": None},
    {"name": "Diana Evans", "email": "employee@company.com", "role": "TEAMLEAD", "department": "HR",
     "domain": "HR Operations", "project": None},
]

_SYSTEM_SETTINGS = {
    "system": {
        "organization_name": "Company Inc.", "timezone": "Asia/Kolkata", "date_format": "YYYY-MM-DD",
        "session_timeout_minutes": 30, "password_min_length": 8, "enable_sso": False, "maintenance_mode": False,
    },
    "goals": {
        "max_goals_per_employee": 8, "min_goal_weightage": 5, "require_manager_approval": True,
        "allow_goal_edit_after_approval": False, "default_review_period": "Q", "evidence_required": True,
    },
    "notifications": {
        "email_enabled": True, "review_reminders": True, "goal_deadline_alerts": True,
        "reminder_days_before": 3, "weekly_digest": False, "escalate_overdue_after_days": 7,
    },
}

_PERSONAL_PREFERENCES = {
    "theme": "Light", "language": "English", "email_notifications": True, "weekly_summary": True,
    "show_team_in_dashboard": True,
}


_KRA_LIBRARY = [
    {"id": "kra-lib-001", "title": "Customer Satisfaction Excellence",
     "description": "Deliver exceptional customer service and keep satisfaction scores high",
     "category": "INDIVIDUAL", "department": "Sales & Marketing", "weightage": 25, "status": "ACTIVE",
     "created_by": "HR Manager", "created_on": "2024-01-15", "last_modified": "2024-01-20", "version": 2,
     "approved_by": "Department Head", "usage_count": 45, "rating": 4.8,
     "tags": ["customer-service", "satisfaction", "quality"],
     "kpis": ["CSAT Score ≥ 4.5/5", "Response Time ≤ 2 hours", "Resolution Rate ≥ 95%"]},
    {"id": "kra-lib-002", "title": "Innovation & Product Development",
     "description": "Drive innovation through new product features and technical improvements",
     "category": "TEAM", "department": "Engineering", "weightage": 30, "status": "APPROVED",
     "created_by": "Tech Lead", "created_on": "2024-01-10", "last_modified": "2024-01-18", "version": 3,
     "approved_by": "CTO", "usage_count": 32, "rating": 4.9,
     "tags": ["innovation", "development", "technology"],
     "kpis": ["Feature Delivery ≥ 90%", "Code Quality Score ≥ 85%", "Innovation Index ≥ 3.5"]},
    {"id": "kra-lib-003", "title": "Financial Performance & Cost Management",
     "description": "Optimise financial performance through cost control and revenue growth",
     "category": "ORGANIZATIONAL", "department": "Finance", "weightage": 35, "status": "ACTIVE",
     "created_by": "CFO", "created_on": "2024-01-05", "last_modified": "2024-01-22", "version": 1,
     "approved_by": "CEO", "usage_count": 28, "rating": 4.6,
     "tags": ["finance", "cost-management", "performance"],
     "kpis": ["Cost Reduction ≥ 15%", "Revenue Growth ≥ 20%", "ROI ≥ 25%"]},
    {"id": "kra-lib-004", "title": "Team Leadership & Development",
     "description": "Lead and develop team members to reach their goals",
     "category": "TEAM", "department": "Human Resources", "weightage": 20, "status": "DRAFT",
     "created_by": "HR Manager", "created_on": "2024-01-23", "last_modified": "2024-01-24", "version": 1,
     "approved_by": None, "usage_count": 12, "rating": 4.3,
     "tags": ["leadership", "development", "team-building"],
     "kpis": ["Team Satisfaction ≥ 4.0/5", "Retention Rate ≥ 90%", "Training Hours ≥ 40/quarter"]},
    {"id": "kra-lib-005", "title": "Quality Assurance & Process Improvement",
     "description": "Keep quality standards high and improve operational processes",
     "category": "INDIVIDUAL", "department": "Operations", "weightage": 25, "status": "ARCHIVED",
     "created_by": "Operations Manager", "created_on": "2023-12-20", "last_modified": "2024-01-15", "version": 4,
     "approved_by": "COO", "usage_count": 67, "rating": 4.7,
     "tags": ["quality", "process-improvement", "operations"],
     "kpis": ["Defect Rate ≤ 2%", "Process Efficiency ≥ 85%", "Audit Score ≥ 95%"]},
    {"id": "kra-lib-006", "title": "Strategic Market Expansion",
     "description": "Grow market presence through strategic initiatives and partnerships",
     "category": "ORGANIZATIONAL", "department": "Sales & Marketing", "weightage": 40, "status": "ACTIVE",
     "created_by": "VP Sales", "created_on": "2024-01-08", "last_modified": "2024-01-21", "version": 2,
     "approved_by": "CEO", "usage_count": 23, "rating": 4.5,
     "tags": ["strategy", "market-expansion", "growth"],
     "kpis": ["Market Share Growth ≥ 15%", "New Customer Acquisition ≥ 100", "Revenue Target Achievement ≥ 110%"]},
]

_KRA_MAPPINGS = [
    {"id": "map-001", "kra_id": "kra-lib-001", "kra_title": "Customer Satisfaction Excellence",
     "mapping_type": "ROLE", "target_name": "Sales Representative", "target_type": "Sales Role",
     "weightage": 35, "is_active": True, "auto_assign": True,
     "conditions": ["Department: Sales", "Level: Individual Contributor", "Experience: ≥2 years"],
     "created_by": "HR Manager", "created_on": "2024-01-15", "usage_count": 45},
    {"id": "map-002", "kra_id": "kra-lib-002", "kra_title": "Innovation & Product Development",
     "mapping_type": "DEPARTMENT", "target_name": "Engineering Department", "target_type": "Department",
     "weightage": 40, "is_active": True, "auto_assign": True,
     "conditions": ["Department: Engineering", "Role Level: Senior+"],
     "created_by": "Tech Lead", "created_on": "2024-01-10", "usage_count": 32},
    {"id": "map-003", "kra_id": "kra-lib-003", "kra_title": "Financial Performance & Cost Management",
     "mapping_type": "ROLE", "target_name": "Finance Manager", "target_type": "Management Role",
     "weightage": 45, "is_active": True, "auto_assign": False,
     "conditions": ["Department: Finance", "Level: Manager", "Budget Authority: Yes"],
     "created_by": "CFO", "created_on": "2024-01-05", "usage_count": 28},
    {"id": "map-004", "kra_id": "kra-lib-004", "kra_title": "Team Leadership & Development",
     "mapping_type": "ROLE", "target_name": "Team Lead", "target_type": "Leadership Role",
     "weightage": 30, "is_active": False, "auto_assign": True,
     "conditions": ["Has Direct Reports: Yes", "Experience: ≥3 years"],
     "created_by": "HR Manager", "created_on": "2024-01-23", "usage_count": 12},
    {"id": "map-005", "kra_id": "kra-lib-005", "kra_title": "Quality Assurance & Process Improvement",
     "mapping_type": "PROJECT", "target_name": "Quality Excellence Initiative", "target_type": "Strategic Project",
     "weightage": 25, "is_active": True, "auto_assign": False,
     "conditions": ["Project Member: Yes", "Role: QA/Process"],
     "created_by": "Operations Manager", "created_on": "2023-12-20", "usage_count": 67},
    {"id": "map-006", "kra_id": "kra-lib-006", "kra_title": "Strategic Market Expansion",
     "mapping_type": "INDIVIDUAL", "target_name": "Sarah Chen - Sales Director", "target_type": "Individual Assignment",
     "weightage": 50, "is_active": True, "auto_assign": False,
     "conditions": ["Direct Assignment", "Strategic Initiative Owner"],
     "created_by": "VP Sales", "created_on": "2024-01-08", "usage_count": 23},
]

_KRA_TEMPLATES = [
    {"id": "ktmpl-001", "name": "Senior Software Engineer Framework",
     "description": "KRA framework for senior engineers covering delivery, quality and mentoring",
     "category": "TECHNICAL", "department": "Engineering", "level": "SENIOR",
     "kras": [
         {"title": "Code Quality & Technical Excellence", "weightage": 35,
          "kpis": ["Code Review Score ≥ 4.5/5", "Bug Rate ≤ 2%"]},
         {"title": "Team Mentorship & Knowledge Sharing", "weightage": 25,
          "kpis": ["Mentees ≥ 2", "Tech Talks ≥ 2/quarter"]},
         {"title": "Project Delivery & Innovation", "weightage": 40,
          "kpis": ["On-time Delivery ≥ 90%", "Innovation Proposals ≥ 2"]},
     ],
     "is_published": True, "is_default": False, "usage_count": 156, "rating": 4.8,
     "author": "Tech Lead - Engineering", "tags": ["engineering", "senior"], "created_on": "2024-01-10"},
    {"id": "ktmpl-002", "name": "Sales Manager Excellence Template",
     "description": "Revenue, team and client KRAs for sales managers",
     "category": "SALES", "department": "Sales & Marketing", "level": "LEAD",
     "kras": [
         {"title": "Revenue Growth & Target Achievement", "weightage": 45,
          "kpis": ["Target Achievement ≥ 105%", "Pipeline Coverage ≥ 3x"]},
         {"title": "Team Performance & Development", "weightage": 30,
          "kpis": ["Team Quota Attainment ≥ 90%"]},
         {"title": "Client Relationship Management", "weightage": 25,
          "kpis": ["Client Retention ≥ 92%", "NPS ≥ 50"]},
     ],
     "is_published": True, "is_default": True, "usage_count": 89, "rating": 4.6,
     "author": "VP Sales", "tags": ["sales", "management"], "created_on": "2024-01-05"},
    {"id": "ktmpl-003", "name": "HR Business Partner Framework",
     "description": "Talent, engagement and organisational KRAs for HR business partners",
     "category": "OPERATIONS", "department": "Human Resources", "level": "SENIOR",
     "kras": [
         {"title": "Talent Acquisition & Retention", "weightage": 40,
          "kpis": ["Time to Hire ≤ 30 days", "Retention ≥ 90%"]},
         {"title": "Employee Engagement & Development", "weightage": 35,
          "kpis": ["Engagement Score ≥ 4.0/5"]},
         {"title": "Organizational Excellence", "weightage": 25,
          "kpis": ["Policy Compliance ≥ 98%"]},
     ],
     "is_published": True, "is_default": False, "usage_count": 45, "rating": 4.7,
     "author": "CHRO", "tags": ["hr", "people"], "created_on": "2024-01-12"},
    {"id": "ktmpl-004", "name": "Executive Leadership Template",
     "description": "Strategy, transformation and stakeholder KRAs for executives",
     "category": "STRATEGIC", "department": "Executive", "level": "EXECUTIVE",
     "kras": [
         {"title": "Strategic Vision & Execution", "weightage": 50,
          "kpis": ["Strategic Goals Met ≥ 85%"]},
         {"title": "Organizational Transformation", "weightage": 30,
          "kpis": ["Transformation Milestones ≥ 90%"]},
         {"title": "Stakeholder Leadership", "weightage": 20,
          "kpis": ["Board Satisfaction ≥ 4.5/5", "Stakeholder Engagement ≥ 90%"]},
     ],
     "is_published": False, "is_default": False, "usage_count": 12, "rating": 4.9,
     "author": "CEO Office", "tags": ["executive", "strategy"], "created_on": "2024-01-20"},
]

_KRA_BULK_OPERATIONS = [
    {"id": "kbulk-001", "type": "import", "name": "Q1 KRA Import - Engineering",
     "description": "Import KRAs for Engineering department from Excel template", "status": "completed",
     "progress": 100, "total_records": 45, "processed_records": 45, "success_count": 43, "error_count": 2,
     "started_by": "HR Manager", "created_at": "2024-01-25 09:15", "completed_at": "2024-01-25 09:18",
     "source": "kra_template_engineering_q1.xlsx", "target": "Engineering Department",
     "errors": ["Row 12: Invalid weightage value - must be between 1-100",
                "Row 28: Missing required field - KRA description"],
     "warnings": ["Row 5: Duplicate KRA title detected",
                  "Row 15: High weightage (>50%) for individual KRA",
                  "Row 32: KRA already exists for this role"]},
    {"id": "kbulk-002", "type": "export", "name": "Sales KRA Export",
     "description": "Export all active Sales department KRAs for review", "status": "completed",
     "progress": 100, "total_records": 32, "processed_records": 32, "success_count": 32, "error_count": 0,
     "started_by": "VP Sales", "created_at": "2024-01-24 14:20", "completed_at": "2024-01-24 14:21",
     "source": "Sales Department KRAs", "target": "sales_kras_export_2024.xlsx", "errors": [], "warnings": []},
    {"id": "kbulk-003", "type": "update", "name": "KRA Weightage Update - Finance",
     "description": "Batch update KRA weightages for Finance department roles", "status": "paused",
     "progress": 65, "total_records": 28, "processed_records": 18, "success_count": 17, "error_count": 1,
     "started_by": "CFO", "created_at": "2024-01-25 10:45", "completed_at": None,
     "source": "Finance Department KRAs", "target": "Finance Department KRAs",
     "errors": ["Row 8: Cannot update archived KRA"],
     "warnings": ["Row 3: Weightage reduced significantly (>20%)",
                  "Row 15: Total weightage exceeds 100% for role"]},
    {"id": "kbulk-004", "type": "sync", "name": "HRMS Integration Sync",
     "description": "Synchronise KRA assignments with the HRMS", "status": "failed",
     "progress": 25, "total_records": 156, "processed_records": 39, "success_count": 35, "error_count": 4,
     "started_by": "System", "created_at": "2024-01-25 08:00", "completed_at": "2024-01-25 08:05",
     "source": "PMS KRA Database", "target": "HRMS System",
     "errors": ["HRMS API connection timeout", "Authentication failed for HRMS endpoint",
                "Data format mismatch in employee records", "Required fields missing in KRA mapping"],
     "warnings": ["Employee ID not found in HRMS: EMP001", "Duplicate KRA assignment detected"]},
    {"id": "kbulk-005", "type": "delete", "name": "Cleanup Archived KRAs",
     "description": "Remove KRAs archived more than 2 years ago", "status": "pending",
     "progress": 0, "total_records": 67, "processed_records": 0, "success_count": 0, "error_count": 0,
     "started_by": "Admin", "created_at": "2024-01-25 11:00", "completed_at": None,
     "source": "Archived KRAs (2022 and earlier)", "target": "Delete permanently", "errors": [], "warnings": []},
]

_KRA_ACTIVITY = [
    {"id": "act-001", "type": "KRA_CREATED", "title": "New KRA: Customer Success Excellence",
     "description": "Created for Sales department with 25% weightage", "timestamp": "2024-01-25 10:30",
     "user": "Sarah Johnson", "status": "SUCCESS"},
    {"id": "act-002", "type": "BULK_IMPORT", "title": "Q1 KRA Import Completed",
     "description": "45 KRAs imported with 2 warnings", "timestamp": "2024-01-25 09:15",
     "user": "Admin", "status": "WARNING"},
    {"id": "act-003", "type": "TEMPLATE_PUBLISHED", "title": "Template: Team Lead Framework",
     "description": "Published to template library", "timestamp": "2024-01-25 08:45",
     "user": "Michael Chen", "status": "SUCCESS"},
    {"id": "act-004", "type": "MAPPING_ADDED", "title": "Role Mapping: Senior Developer",
     "description": "Mapped 4 KRAs to senior developer role", "timestamp": "2024-01-24 16:20",
     "user": "Jessica Wong", "status": "SUCCESS"},
    {"id": "act-005", "type": "KRA_APPROVED", "title": "KRA Approval: Innovation & Research",
     "description": "Approved for Engineering department", "timestamp": "2024-01-24 14:10",
     "user": "HR Manager", "status": "SUCCESS"},
    {"id": "act-006", "type": "BULK_IMPORT", "title": "HRMS Sync Failed",
     "description": "Connection timeout during sync operation", "timestamp": "2024-01-24 08:00",
     "user": "System", "status": "ERROR"},
]

_GOAL_CATEGORY_MASTER = [
    {"id": "cat-001", "name": "Technical Excellence",
     "description": "Technical skills, certifications and engineering capabilities", "color": "blue",
     "is_active": True, "total_goals": 45, "completed_goals": 32, "avg_progress": 78,
     "department_access": ["Engineering", "IT", "Product"], "required_approval": True,
     "max_goals_per_person": 5, "created_on": "2024-01-15", "last_modified": "2025-02-28"},
    {"id": "cat-002", "name": "Professional Development",
     "description": "Career growth, process improvement and professional skills", "color": "green",
     "is_active": True, "total_goals": 38, "completed_goals": 28, "avg_progress": 72,
     "department_access": ["All"], "required_approval": False,
     "max_goals_per_person": 3, "created_on": "2024-01-15", "last_modified": "2025-01-20"},
    {"id": "cat-003", "name": "Leadership & Management",
     "description": "Leadership skills, team management and organisational impact", "color": "purple",
     "is_active": True, "total_goals": 42, "completed_goals": 25, "avg_progress": 65,
     "department_access": ["All"], "required_approval": True,
     "max_goals_per_person": 4, "created_on": "2024-01-15", "last_modified": "2025-02-10"},
    {"id": "cat-004", "name": "Personal Growth",
     "description": "Individual development, soft skills and personal achievement", "color": "orange",
     "is_active": True, "total_goals": 31, "completed_goals": 22, "avg_progress": 74,
     "department_access": ["All"], "required_approval": False,
     "max_goals_per_person": 2, "created_on": "2024-01-15", "last_modified": "2025-01-25"},
    {"id": "cat-005", "name": "Innovation & Research",
     "description": "Research initiatives, innovation projects and experiments", "color": "red",
     "is_active": False, "total_goals": 8, "completed_goals": 3, "avg_progress": 45,
     "department_access": ["Engineering", "Product", "Research"], "required_approval": True,
     "max_goals_per_person": 2, "created_on": "2024-06-01", "last_modified": "2024-12-15"},
]

_ASSESSMENT_SECTIONS = [
    {"id": "kra-section", "title": "Key Result Areas (KRAs)", "type": "KRA", "weight": 60, "items": [
        {"id": "kra-1", "description": "Software Development & Code Quality", "rating": 4, "weight": 30,
         "target_score": 4, "comment": "Consistently delivers high-quality code with few bugs",
         "evidence": ["Code review scores", "Bug reports", "Performance metrics"]},
        {"id": "kra-2", "description": "Project Delivery & Timeline Management", "rating": 4, "weight": 30,
         "target_score": 4, "comment": "Meets project deadlines and delivers to specification",
         "evidence": ["Project completion reports", "Timeline adherence"]},
    ]},
    {"id": "goal-section", "title": "Individual Goals", "type": "Goal", "weight": 30, "items": [
        {"id": "goal-1", "description": "Complete React.js certification", "rating": 5, "weight": 15,
         "target_score": 4, "comment": "Completed the certification with distinction",
         "evidence": ["Certificate", "Course completion records"]},
        {"id": "goal-2", "description": "Mentor 2 junior developers", "rating": 4, "weight": 15,
         "target_score": 4, "comment": "Actively mentoring 2 junior developers with positive feedback",
         "evidence": ["Mentorship feedback", "Progress reports"]},
    ]},
    {"id": "competency-section", "title": "Core Competencies", "type": "Competency", "weight": 10, "items": [
        {"id": "comp-1", "description": "Leadership & Initiative", "rating": 4, "weight": 5,
         "target_score": 4, "comment": "Shows good leadership qualities and takes initiative",
         "evidence": ["360 feedback", "Project leadership examples"]},
        {"id": "comp-2", "description": "Communication & Collaboration", "rating": 4, "weight": 5,
         "target_score": 4, "comment": "Excellent communication and team collaboration",
         "evidence": ["Team feedback", "Presentation skills"]},
    ]},
]

_REVIEW_TEMPLATES = [
    {"id": "rtmpl-001", "name": "Standard Annual Review",
     "description": "Annual review covering KRAs, goals and competencies", "type": "Goal-KRA-Matrix",
     "category": "Annual", "is_active": True, "is_default": True, "rating_scale": "5-point",
     "sections": [
         {"title": "Key Result Areas", "type": "KRA", "weight": 60, "is_required": True},
         {"title": "Individual Goals", "type": "Goal", "weight": 30, "is_required": True},
         {"title": "Core Competencies", "type": "Competency", "weight": 10, "is_required": True},
     ],
     "applicable_roles": ["EMPLOYEE", "TEAMLEAD", "MANAGER"], "departments": ["All"],
     "created_by": "HR Admin", "created_on": "2024-01-15", "last_modified": "2024-02-20", "usage_count": 145},
    {"id": "rtmpl-002", "name": "Quarterly Goal Review",
     "description": "Focused quarterly review for goal tracking and adjustment", "type": "Goal-KRA-Matrix",
     "category": "Quarterly", "is_active": True, "is_default": False, "rating_scale": "5-point",
     "sections": [
         {"title": "Goal Progress", "type": "Goal", "weight": 70, "is_required": True},
         {"title": "KRA Alignment", "type": "KRA", "weight": 30, "is_required": True},
     ],
     "applicable_roles": ["EMPLOYEE", "TEAMLEAD", "MANAGER"], "departments": ["Engineering", "Product"],
     "created_by": "Engineering Manager", "created_on": "2024-02-01", "last_modified": "2024-02-15",
     "usage_count": 89},
    {"id": "rtmpl-003", "name": "Self-Assessment Form",
     "description": "Employee self-assessment ahead of the R1 review", "type": "Self-Assessment",
     "category": "Annual", "is_active": True, "is_default": False, "rating_scale": "5-point",
     "sections": [
         {"title": "Achievements", "type": "Custom", "weight": 50, "is_required": True},
         {"title": "Individual Goals", "type": "Goal", "weight": 50, "is_required": True},
     ],
     "applicable_roles": ["EMPLOYEE", "TEAMLEAD"], "departments": ["All"],
     "created_by": "HR Admin", "created_on": "2024-03-01", "last_modified": "2024-03-01", "usage_count": 210},
    {"id": "rtmpl-004", "name": "Project Retrospective Review",
     "description": "Project-based review for contractors and project teams", "type": "Custom",
     "category": "Project-Based", "is_active": False, "is_default": False, "rating_scale": "10-point",
     "sections": [
         {"title": "Project Delivery", "type": "KRA", "weight": 60, "is_required": True},
         {"title": "Collaboration", "type": "Competency", "weight": 30, "is_required": False},
     ],
     "applicable_roles": ["EMPLOYEE"], "departments": ["Engineering"],
     "created_by": "Engineering Manager", "created_on": "2024-04-10", "last_modified": "2024-05-02",
     "usage_count": 14},
]

_REVIEW_TEMPLATE_LIBRARY = [
    {"id": "lib-1", "name": "Tech Leadership Review", "description": "Template for technical leadership roles",
     "category": "Leadership", "download_count": 23, "rating": 4.8, "author": "Tech Community"},
    {"id": "lib-2", "name": "Sales Performance Matrix", "description": "Revenue-focused performance evaluation",
     "category": "Sales", "download_count": 45, "rating": 4.6, "author": "Sales Excellence Team"},
    {"id": "lib-3", "name": "Customer Success Review", "description": "Customer-centric performance measures",
     "category": "Customer Success", "download_count": 31, "rating": 4.7, "author": "CS Best Practices"},
]

_REVIEW_REPORT = {
    "kpis": {"completion_rate": 85.3, "completion_delta": 3.2, "avg_cycle_days": 15.6,
             "overdue": 2, "overdue_pct": 1.3, "avg_rating": 4.3},
    "cycles": [
        {"cycle": "Q1 2024", "self_assessment": 95, "r1_review": 88, "r2_review": 82, "final": 78, "employees": 142},
        {"cycle": "Q2 2024", "self_assessment": 92, "r1_review": 85, "r2_review": 80, "final": 75, "employees": 145},
        {"cycle": "Q3 2024", "self_assessment": 98, "r1_review": 91, "r2_review": 87, "final": 82, "employees": 148},
        {"cycle": "Q4 2024", "self_assessment": 89, "r1_review": 79, "r2_review": 73, "final": 68, "employees": 150},
    ],
    "status": [
        {"status": "Completed", "count": 128},
        {"status": "In Progress", "count": 15},
        {"status": "Pending", "count": 5},
        {"status": "Overdue", "count": 2},
    ],
    "departments": [
        {"department": "Engineering", "completed": 42, "pending": 3, "overdue": 0},
        {"department": "Sales", "completed": 28, "pending": 2, "overdue": 2},
        {"department": "Marketing", "completed": 25, "pending": 2, "overdue": 1},
        {"department": "HR", "completed": 14, "pending": 1, "overdue": 0},
        {"department": "Finance", "completed": 16, "pending": 1, "overdue": 1},
    ],
    "reviewers": [
        {"reviewer": "Michael Chen", "direct_reports": 8, "completed": 6, "pending": 2, "avg_rating": 4.2},
        {"reviewer": "Sarah Johnson", "direct_reports": 6, "completed": 5, "pending": 1, "avg_rating": 4.5},
        {"reviewer": "Emily Davis", "direct_reports": 7, "completed": 7, "pending": 0, "avg_rating": 4.1},
        {"reviewer": "David Wilson", "direct_reports": 5, "completed": 4, "pending": 1, "avg_rating": 4.3},
        {"reviewer": "Lisa Anderson", "direct_reports": 6, "completed": 5, "pending": 1, "avg_rating": 4.4},
    ],
    "timeline": [
        {"stage": "Self Assessment", "avg_days": 3.2, "target_days": 3},
        {"stage": "R1 Review", "avg_days": 5.8, "target_days": 5},
        {"stage": "R2 Review", "avg_days": 4.1, "target_days": 4},
        {"stage": "Final Review", "avg_days": 2.5, "target_days": 2},
    ],
    "zones": [
        {"zone": "GREEN", "count": 89},
        {"zone": "YELLOW", "count": 45},
        {"zone": "RED", "count": 16},
    ],
}


_EMPLOYEE_SCORE_HISTORY = [
    {"employee": "Sarah Johnson", "department": "Engineering", "position": "Senior Developer", "cycles": [
        {"cycle": "2022", "kra_score": 3.8, "goal_score": 3.9, "overall_score": 3.8},
        {"cycle": "2023", "kra_score": 4.1, "goal_score": 4.2, "overall_score": 4.1},
        {"cycle": "Q1 2024", "kra_score": 4.3, "goal_score": 4.4, "overall_score": 4.3},
    ]},
    {"employee": "Michael Chen", "department": "Product", "position": "Product Manager", "cycles": [
        {"cycle": "2022", "kra_score": 4.2, "goal_score": 4.0, "overall_score": 4.1},
        {"cycle": "2023", "kra_score": 4.1, "goal_score": 4.1, "overall_score": 4.1},
        {"cycle": "Q1 2024", "kra_score": 4.2, "goal_score": 4.0, "overall_score": 4.1},
    ]},
    {"employee": "Emily Davis", "department": "Design", "position": "UX Designer", "cycles": [
        {"cycle": "2022", "kra_score": 4.0, "goal_score": 4.2, "overall_score": 4.1},
        {"cycle": "2023", "kra_score": 3.7, "goal_score": 3.8, "overall_score": 3.7},
        {"cycle": "Q1 2024", "kra_score": 3.4, "goal_score": 3.6, "overall_score": 3.5},
    ]},
    {"employee": "Alex Kumar", "department": "Engineering", "position": "Developer", "cycles": [
        {"cycle": "2023", "kra_score": 3.2, "goal_score": 3.4, "overall_score": 3.3},
        {"cycle": "Q1 2024", "kra_score": 3.7, "goal_score": 3.9, "overall_score": 3.8},
    ]},
    {"employee": "Daniel Lee", "department": "Engineering", "position": "Junior Developer", "cycles": [
        {"cycle": "2023", "kra_score": 3.0, "goal_score": 3.1, "overall_score": 3.0},
        {"cycle": "Q1 2024", "kra_score": 2.8, "goal_score": 2.9, "overall_score": 2.8},
    ]},
]

_DEPARTMENT_CYCLES = [
    {"department": "Engineering", "cycle": "2022", "avg_score": 3.9, "completion_rate": 82},
    {"department": "Engineering", "cycle": "2023", "avg_score": 4.0, "completion_rate": 86},
    {"department": "Engineering", "cycle": "Q1 2024", "avg_score": 4.2, "completion_rate": 90},
    {"department": "Product", "cycle": "2022", "avg_score": 4.1, "completion_rate": 90},
    {"department": "Product", "cycle": "2023", "avg_score": 4.2, "completion_rate": 92},
    {"department": "Product", "cycle": "Q1 2024", "avg_score": 4.3, "completion_rate": 95},
    {"department": "Design", "cycle": "2022", "avg_score": 4.0, "completion_rate": 85},
    {"department": "Design", "cycle": "2023", "avg_score": 3.9, "completion_rate": 84},
    {"department": "Design", "cycle": "Q1 2024", "avg_score": 3.9, "completion_rate": 88},
    {"department": "Sales", "cycle": "2022", "avg_score": 4.1, "completion_rate": 80},
    {"department": "Sales", "cycle": "2023", "avg_score": 4.3, "completion_rate": 83},
    {"department": "Sales", "cycle": "Q1 2024", "avg_score": 4.4, "completion_rate": 85},
]

_GOAL_ACHIEVEMENT_CYCLES = [
    {"category": "Technical", "cycle": "2022", "achieved": 120, "total": 160},
    {"category": "Technical", "cycle": "2023", "achieved": 138, "total": 170},
    {"category": "Technical", "cycle": "Q1 2024", "achieved": 145, "total": 180},
    {"category": "Leadership", "cycle": "2022", "achieved": 60, "total": 90},
    {"category": "Leadership", "cycle": "2023", "achieved": 70, "total": 92},
    {"category": "Leadership", "cycle": "Q1 2024", "achieved": 78, "total": 95},
    {"category": "Customer Focus", "cycle": "2022", "achieved": 90, "total": 110},
    {"category": "Customer Focus", "cycle": "2023", "achieved": 92, "total": 115},
    {"category": "Customer Focus", "cycle": "Q1 2024", "achieved": 98, "total": 120},
]

_GOAL_ACTIVITY = [
    {"user": "Sarah Johnson", "action": "created a new goal", "goal": "Complete React Certification",
     "time": "2 hours ago"},
    {"user": "Michael Chen", "action": "submitted evidence for", "goal": "Lead Cross-functional Project",
     "time": "4 hours ago"},
    {"user": "Jessica Wong", "action": "approved goal", "goal": "Implement CI/CD Pipeline", "time": "6 hours ago"},
    {"user": "David Kumar", "action": "completed goal", "goal": "Cloud Security Training", "time": "1 day ago"},
]


_COMPETENCY_CYCLES = [
    {"competency": "Communication", "cycle": "2022", "avg_rating": 3.8},
    {"competency": "Communication", "cycle": "2023", "avg_rating": 3.9},
    {"competency": "Communication", "cycle": "Q1 2024", "avg_rating": 4.1},
    {"competency": "Problem Solving", "cycle": "2022", "avg_rating": 4.0},
    {"competency": "Problem Solving", "cycle": "2023", "avg_rating": 4.1},
    {"competency": "Problem Solving", "cycle": "Q1 2024", "avg_rating": 4.2},
    {"competency": "Ownership", "cycle": "2022", "avg_rating": 4.1},
    {"competency": "Ownership", "cycle": "2023", "avg_rating": 4.0},
    {"competency": "Ownership", "cycle": "Q1 2024", "avg_rating": 3.9},
]


def _copy(records):
    return copy.deepcopy(records)


# --- Masters ---

def get_departments():
    return _copy(_DEPARTMENTS)


def get_domains():
    return _copy(_DOMAINS)


def get_projects():
    return _copy(_PROJECTS)


def get_kras():
    return _copy(_KRAS)


# --- People ---

def get_employees():
    return _copy(_EMPLOYEES)


def get_team_members(manager_name: str = None):
    """
    Return the demo team. The same team is shown to every manager and
    team lead; `manager_name` is accepted for when real data arrives.
    """
    return _copy(_TEAM_MEMBERS)


# --- Goals ---

def get_my_goals(user_id: str = None):
    return _copy(_MY_GOALS)


def get_team_goals():
    return _copy(_TEAM_GOALS)


def get_goal_templates():
    return _copy(_GOAL_TEMPLATES)


def get_goal_category_analysis():
    return _copy(_GOAL_CATEGORIES)


def get_evidence():
    return _copy(_EVIDENCE)


# --- Reviews ---

def get_my_reviews(user_id: str = None):
    return _copy(_MY_REVIEWS)


def get_performance_summary(user_id: str = None):
    return _copy(_PERFORMANCE_SUMMARY)


def get_team_reviews():
    return _copy(_TEAM_REVIEWS)


def get_review_workflows():
    return _copy(_REVIEW_WORKFLOWS)


def get_review_cycle_stats():
    return _copy(_REVIEW_CYCLE_STATS)


# --- Organization ---

def get_org_stats():
    return _copy(_ORG_STATS)


def get_department_metrics():
    return _copy(_DEPARTMENT_METRICS)


def get_org_trend():
    return _copy(_ORG_TREND)


def get_system_activities():
    return _copy(_SYSTEM_ACTIVITIES)


def get_personal_trend(user_id: str = None):
    return _copy(_PERSONAL_TREND)


def get_upcoming_deadlines(user_id: str = None):
    return _copy(_UPCOMING_DEADLINES)


# --- Bulk operations ---

def get_bulk_operations():
    return _copy(_BULK_OPERATIONS)


def get_import_preview():
    return _copy(_IMPORT_PREVIEW)


# --- Settings ---

def get_system_settings(settings_type: str):
    return _copy(_SYSTEM_SETTINGS.get(settings_type, {}))


def get_personal_preferences(user_id: str = None):
    return _copy(_PERSONAL_PREFERENCES)


# --- KRA management ---

def get_kra_library():
    return _copy(_KRA_LIBRARY)


def get_kra_mappings():
    return _copy(_KRA_MAPPINGS)


def get_kra_templates():
    return _copy(_KRA_TEMPLATES)


def get_kra_bulk_operations():
    return _copy(_KRA_BULK_OPERATIONS)


def get_kra_activity():
    return _copy(_KRA_ACTIVITY)


# --- Goal categories and review set-up ---

def get_goal_categories():
    return _copy(_GOAL_CATEGORY_MASTER)


def get_assessment_sections(employee_id: str = None):
    """The same demo assessment form is used for every employee."""
    return _copy(_ASSESSMENT_SECTIONS)


def get_review_templates():
    return _copy(_REVIEW_TEMPLATES)


def get_review_template_library():
    return _copy(_REVIEW_TEMPLATE_LIBRARY)


def get_review_report():
    return _copy(_REVIEW_REPORT)


# --- Cross-cycle history ---

def get_employee_score_history():
    return _copy(_EMPLOYEE_SCORE_HISTORY)


def get_department_cycles():
    return _copy(_DEPARTMENT_CYCLES)


def get_goal_achievement_cycles():
    return _copy(_GOAL_ACHIEVEMENT_CYCLES)


def get_goal_activity():
    return _copy(_GOAL_ACTIVITY)


def get_competency_cycles():
    return _copy(_COMPETENCY_CYCLES)
