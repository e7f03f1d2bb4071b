"""
Static technology knowledge base.

Keys are lowercase topic keywords, values are fixed explanatory paragraphs.
Entry order is the order the responder scans them in.
"""

from types import MappingProxyType
from typing import Mapping, Optional

_ENTRIES = {
    # --- Languages ---
    'javascript': "JavaScript is a high-level programming language primarily used for web development. It allows you to create interactive elements on websites and is supported by all modern web browsers.",
    'typescript': "TypeScript is a superset of JavaScript that adds static typing. It helps catch errors during development and makes code more maintainable for larger projects.",

    # --- Frameworks ---
    'react': "React is a JavaScript library for building user interfaces, particularly single-page applications. It's maintained by Facebook and allows developers to create reusable UI components.",
    'nextjs': "Next.js is a React framework that enables server-side rendering and static site generation. It simplifies the process of building fast and SEO-friendly React applications.",
    'python': "Python is a high-level, general-purpose programming language known for its readability and simplicity. It's widely used in data science, AI, web development, and automation.",

    # --- Web ---
    'html': "HTML (HyperText Markup Language) is the standard markup language for documents designed to be displayed in a web browser. It defines the structure and content of web pages.",
    'css': "CSS (Cascading Style Sheets) is a style sheet language used for describing the presentation of a document written in HTML. It controls the layout and appearance of web pages.",
    'api': "API (Application Programming Interface) is a set of rules that allows different software applications to communicate with each other. It defines the methods and data formats that applications can use to request and exchange information.",

    # --- Tooling & infrastructure ---
    'database': "A database is an organized collection of data stored electronically. It allows for efficient retrieval, manipulation, and management of data. Common types include relational databases (SQL) and NoSQL databases.",
    'git': "Git is a distributed version control system used to track changes in source code during software development. It allows multiple developers to work on the same codebase without conflicts.",
    'docker': "Docker is a platform that uses containerization technology to package applications and their dependencies together. This ensures consistent operation across different computing environments.",
    'nodejs': "Node.js is a JavaScript runtime environment that allows executing JavaScript code outside a web browser. It's particularly useful for building scalable network applications and APIs.",

    # --- Concepts ---
    'ai': "Artificial Intelligence (AI) refers to computer systems capable of performing tasks that typically require human intelligence. This includes learning from experience, recognizing patterns, and making decisions.",
    'machinelearning': "Machine Learning is a subset of AI focused on building systems that can learn from and make decisions based on data. It enables computers to improve performance without explicit programming.",
    'frontend': "Frontend development refers to building the user-facing parts of websites and applications. It involves using HTML, CSS, and JavaScript to create interfaces that users can see and interact with.",
    'backend': "Backend development refers to server-side web application logic. It involves working with servers, databases, and APIs to power the frontend experience and process business logic.",
    'cloud': "Cloud computing provides on-demand delivery of computing services over the internet. This includes servers, storage, databases, networking, software, and analytics without direct active management by the user.",
    'security': "Cybersecurity involves protecting computer systems, networks, and data from digital attacks, damage, or unauthorized access. It's increasingly important as more businesses and services move online.",
    'devops': "DevOps is a set of practices that combines software development and IT operations. It aims to shorten the development lifecycle while delivering features, fixes, and updates more frequently and reliably.",
}

KNOWLEDGE_BASE: Mapping[str, str] = MappingProxyType(_ENTRIES)


def find_in_text(text: str, knowledge: Mapping[str, str] = KNOWLEDGE_BASE) -> Optional[str]:
    """
    Return the first entry whose key occurs anywhere in `text`.
    Plain substring containment, so "css" also matches inside "success".
    """
    for key, value in knowledge.items():
        if key in text:
            return value
    return None


def lookup(topic: str, knowledge: Mapping[str, str] = KNOWLEDGE_BASE) -> Optional[str]:
    """Exact key lookup."""
    return knowledge.get(topic)
