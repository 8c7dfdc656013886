r"""
Starter LaTeX templates for a new resume.

classic: direct \name/\contact commands and "\textbf{X} \hfill Y" line pairs
modern: center heading block with \resumeSubheading / \resumeItem macros
"""

CLASSIC_TEMPLATE = r"""\documentclass{resume}
\usepackage{fontspec}
\usepackage[margin=0.75in]{geometry}

\name{YOUR NAME}
\contact{email@example.com | Phone | Location}

\section*{EDUCATION}
\textbf{University Name} \hfill Location
\textit{Degree} \hfill Date
\begin{itemize}
  \item GPA: ...
  \item Relevant Coursework: ...
\end{itemize}

\section*{EXPERIENCE}
\textbf{Company Name} \hfill Location
\textit{Role} \hfill Date
\begin{itemize}
  \item Description of achievements...
\end{itemize}
\end{document}
"""

MODERN_TEMPLATE = r"""\documentclass[letterpaper,11pt]{article}
\usepackage{latexsym}
\usepackage[empty]{fullpage}
\usepackage{titlesec}
\usepackage[hidelinks]{hyperref}
\pagestyle{empty}

\newcommand{\resumeItem}[1]{\item\small{#1}}
\newcommand{\resumeItemWithTitle}[2]{\item\small{\textbf{#1}: #2}}
\newcommand{\resumeSubheading}[4]{\item \textbf{#1} \hfill #2 \\ \textit{#3} \hfill #4}
\newcommand{\resumeSubHeadingListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\resumeSubHeadingListEnd}{\end{itemize}}
\newcommand{\resumeItemListStart}{\begin{itemize}}
\newcommand{\resumeItemListEnd}{\end{itemize}\vspace{-5pt}}

\begin{document}

\begin{center}
    \textbf{\Huge \scshape Your Name} \\ \vspace{1pt}
    \small 123-456-7890 $|$ \href{mailto:you@example.com}{\underline{you@example.com}} $|$ City, Country
\end{center}

\section{Education}
  \resumeSubHeadingListStart
    \resumeSubheading
      {University Name}{City, Country}
      {Bachelor of Science in Major}{Sep. 2022 -- Jun. 2026}
      \resumeItemListStart
        \resumeItem{GPA: 3.9/4.0}
        \resumeItemWithTitle{Coursework}{Data Structures, Linear Algebra}
      \resumeItemListEnd
  \resumeSubHeadingListEnd

\section{Experience}
  \resumeSubHeadingListStart
    \resumeSubheading
      {Company Name}{City, Country}
      {Role}{Jun. 2025 -- Aug. 2025}
      \resumeItemListStart
        \resumeItem{Describe an achievement with \textbf{measurable} impact}
      \resumeItemListEnd
  \resumeSubHeadingListEnd

\end{document}
"""

STARTER_TEMPLATES = {
    "classic": CLASSIC_TEMPLATE,
    "modern": MODERN_TEMPLATE,
}

DEFAULT_TEMPLATE = "classic"


def get_starter_template(name: str = DEFAULT_TEMPLATE) -> str:
    """
    Return a starter template by name.

    Raises:
        ValueError: If name is not a known template
    """
    if name not in STARTER_TEMPLATES:
        raise ValueError(f"Unknown template '{name}'. Valid templates: {sorted(STARTER_TEMPLATES)}")
    return STARTER_TEMPLATES[name]
