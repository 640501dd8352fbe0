from scanmatrix.run import main

main()
